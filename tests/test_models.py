import pytest

from railbook.models import MAX_SEATS, Booking, SeatDay, Train


def _train():
    return Train(
        number=123456,
        name="Express",
        source="Pune",
        dest="Delhi",
        schedule=[SeatDay(d, 2, 2025) for d in (1, 2, 3)],
    )


def test_seat_day_defaults_to_full_train():
    seat = SeatDay(1, 2, 2025)
    assert seat.total_seats == MAX_SEATS
    assert seat.w_list == 0
    assert seat.date == (1, 2, 2025)


def test_schedule_for_finds_matching_date():
    train = _train()
    seat = train.schedule_for(2, 2, 2025)
    assert seat is train.schedule[1]


def test_schedule_for_missing_date_returns_none():
    train = _train()
    assert train.schedule_for(4, 2, 2025) is None
    assert train.schedule_for(1, 3, 2025) is None


def test_booking_to_line_layout():
    booking = Booking("alice", 123456, "Express", 1, 2, 2025, 7, "Alice Smith")
    assert booking.to_line() == "alice 123456 Express 1 2 2025 7 Alice Smith"


def test_booking_round_trip_keeps_name_with_spaces():
    booking = Booking("bob", 100050, "Coastal", 9, 12, 2024, 42, "Bob  The Builder")
    assert Booking.from_line(booking.to_line() + "\n") == booking


@pytest.mark.parametrize(
    "line",
    ["", "alice 1 Express 1 2 2025 7", "alice x Express 1 2 2025 7 Alice"],
)
def test_booking_from_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        Booking.from_line(line)