import pytest

from railbook.models import DAYS_PER_TRAIN, MAX_SEATS, Train
from railbook.reservations import (
    NoBookingsError,
    ReservationSystem,
    TrainNotFoundError,
)
from railbook.storage import Storage


@pytest.fixture
def system(tmp_path):
    return ReservationSystem(Storage(tmp_path), [])


@pytest.fixture
def train(system):
    return system.create_train("Express", "Pune", "Delhi", 5, 6, 2025, number=12345)


def test_create_train_schedule_consecutive_days(train):
    assert [seat.date for seat in train.schedule] == [
        (5 + offset, 6, 2025) for offset in range(DAYS_PER_TRAIN)
    ]
    assert all(seat.total_seats == MAX_SEATS for seat in train.schedule)
    assert all(seat.w_list == 0 for seat in train.schedule)


def test_create_train_prepends_and_persists(system, train, tmp_path):
    second = system.create_train("Mail", "Goa", "Agra", 1, 2, 2026, number=54321)
    assert system.trains == [second, train]
    assert Storage(tmp_path).load_trains() == system.trains


def test_create_train_random_number_in_range(system):
    created = system.create_train("Local", "A", "B", 1, 1, 2025)
    assert 99999 <= created.number < 99999 + 10000


def test_reserve_assigns_first_seat(system, train, tmp_path):
    result = system.reserve("alice", "Alice Smith", 12345, 5, 6, 2025)
    assert not result.waitlisted
    assert result.booking.seat_number == 1
    assert result.seat.total_seats == MAX_SEATS - 1
    assert Storage(tmp_path).read_bookings() == [result.booking]


def test_reserve_seat_numbers_increase(system, train):
    first = system.reserve("alice", "Alice", 12345, 6, 6, 2025)
    second = system.reserve("bob", "Bob", 12345, 6, 6, 2025)
    assert second.booking.seat_number == first.booking.seat_number + 1


def test_reserve_full_train_goes_to_waitlist(system, train, tmp_path):
    train.schedule[0].total_seats = 0
    result = system.reserve("alice", "Alice", 12345, 5, 6, 2025)
    assert result.waitlisted
    assert result.waitlist_position == 1
    reloaded = Storage(tmp_path).load_trains()
    assert reloaded[0].schedule[0].w_list == result.waitlist_position


def test_reserve_unknown_train(system, train):
    with pytest.raises(TrainNotFoundError):
        system.reserve("alice", "Alice", 999, 5, 6, 2025)


def test_reserve_unknown_date(system, train):
    with pytest.raises(TrainNotFoundError):
        system.reserve("alice", "Alice", 12345, 9, 6, 2025)


def test_cancel_without_bookings_file(system, train):
    with pytest.raises(NoBookingsError):
        system.cancel("alice", 12345, 5, 6, 2025)


def test_cancel_unknown_train(system, train):
    with pytest.raises(TrainNotFoundError):
        system.cancel("alice", 1, 5, 6, 2025)


def test_cancel_restores_seat(system, train, tmp_path):
    booked = system.reserve("alice", "Alice", 12345, 5, 6, 2025)
    kept = system.reserve("bob", "Bob", 12345, 5, 6, 2025)
    result = system.cancel("alice", 12345, 5, 6, 2025)
    assert result.cancelled == (booked.booking,)
    assert result.seat.total_seats == MAX_SEATS - 1
    assert Storage(tmp_path).read_bookings() == [kept.booking]


def test_cancel_consumes_waitlist_first(system, train):
    system.reserve("alice", "Alice", 12345, 5, 6, 2025)
    seat = train.schedule[0]
    seat.w_list = 2
    before = seat.total_seats
    result = system.cancel("alice", 12345, 5, 6, 2025)
    assert result.seat.w_list == 1
    assert result.seat.total_seats == before


def test_cancel_no_matching_booking(system, train, tmp_path):
    system.reserve("bob", "Bob", 12345, 5, 6, 2025)
    with pytest.raises(NoBookingsError):
        system.cancel("alice", 12345, 5, 6, 2025)
    assert len(Storage(tmp_path).read_bookings()) == 1


def test_bookings_for_filters_user(system, train):
    mine = system.reserve("alice", "Alice", 12345, 5, 6, 2025).booking
    system.reserve("bob", "Bob", 12345, 5, 6, 2025)
    assert system.bookings_for("alice") == [mine]
    assert system.bookings_for("carol") == []


def test_bookings_for_without_file(system):
    with pytest.raises(NoBookingsError):
        system.bookings_for("alice")


def test_system_accepts_existing_trains(tmp_path):
    existing = Train(number=7, name="Old", source="X", dest="Y")
    system = ReservationSystem(Storage(tmp_path), [existing])
    assert system.trains == [existing]