"""Core data types: trains, their daily seat records, and bookings."""

from __future__ import annotations

from dataclasses import dataclass, field

BOX_WIDTH = 140
MAX_SEATS = 100
DAYS_PER_TRAIN = 3

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"


@dataclass
class SeatDay:
    """Seat availability of one train on one travel date."""

    day: int
    month: int
    year: int
    total_seats: int = MAX_SEATS
    w_list: int = 0
    c_b_status: int = 0
    array_seat_status: int = 0

    @property
    def date(self) -> tuple[int, int, int]:
        return (self.day, self.month, self.year)


@dataclass
class Train:
    """A train with its route and the dates it runs on."""

    number: int
    name: str
    source: str
    dest: str
    schedule: list[SeatDay] = field(default_factory=list)

    def schedule_for(self, day: int, month: int, year: int) -> SeatDay | None:
        """Return the seat record for the given date, or None if the train does not run then."""
        wanted = (day, month, year)
        return next((seat for seat in self.schedule if seat.date == wanted), None)


@dataclass
class Booking:
    """A reserved seat, as stored one per line in the bookings file."""

    username: str
    train_number: int
    train_name: str
    day: int
    month: int
    year: int
    seat_number: int
    name: str

    def to_line(self) -> str:
        """Serialise to a single line without a trailing newline."""
        return (
            f"{self.username} {self.train_number} {self.train_name} "
            f"{self.day} {self.month} {self.year} {self.seat_number} {self.name}"
        )

    @classmethod
    def from_line(cls, line: str) -> Booking:
        """Parse a line written by to_line; the passenger name may hold spaces."""
        parts = line.rstrip("\r\n").split(None, 7)
        if len(parts) < 8:
            raise ValueError(f"malformed booking line: {line!r}")
        username, number, train_name, day, month, year, seat, name = parts
        try:
            return cls(
                username=username,
                train_number=int(number),
                train_name=train_name,
                day=int(day),
                month=int(month),
                year=int(year),
                seat_number=int(seat),
                name=name,
            )
        except ValueError as exc:
            raise ValueError(f"malformed booking line: {line!r}") from exc