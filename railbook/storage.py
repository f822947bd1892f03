"""Plain-text persistence of trains, seat records and bookings."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .models import DAYS_PER_TRAIN, Booking, SeatDay, Train


class Storage:
    """Reads and writes the data files kept in one directory."""

    def __init__(self, directory: str | os.PathLike = ".") -> None:
        self.directory = Path(directory)
        self.trains_path = self.directory / "trains.dat"
        self.seats_path = self.directory / "seats.dat"
        self.bookings_path = self.directory / "bookings.dat"
        self._temp_bookings_path = self.directory / "temp_bookings.dat"

    def save_trains(self, trains: Iterable[Train]) -> None:
        """Write every train and its seat records, replacing earlier contents."""
        with open(self.trains_path, "w", encoding="utf-8") as train_file, open(
            self.seats_path, "w", encoding="utf-8"
        ) as seat_file:
            for train in trains:
                for seat in train.schedule:
                    seat_file.write(
                        f"{seat.day} {seat.month} {seat.year} {seat.total_seats} "
                        f"{seat.w_list} {seat.c_b_status} {seat.array_seat_status}\n"
                    )
                train_file.write(f"{train.number} {train.name} {train.source} {train.dest}\n")

    def load_trains(self) -> list[Train]:
        """Read the trains saved by save_trains; no files means no trains."""
        if not self.trains_path.exists():
            return []
        trains = [self._parse_train(text) for text in self._lines(self.trains_path)]
        seats = (
            [self._parse_seat(text) for text in self._lines(self.seats_path)]
            if self.seats_path.exists()
            else []
        )
        if len(seats) != DAYS_PER_TRAIN * len(trains):
            raise ValueError(
                f"expected {DAYS_PER_TRAIN * len(trains)} seat records, found {len(seats)}"
            )
        for index, train in enumerate(trains):
            start = index * DAYS_PER_TRAIN
            train.schedule = seats[start : start + DAYS_PER_TRAIN]
        return trains

    def read_bookings(self) -> list[Booking]:
        """All stored bookings; raises FileNotFoundError when none were ever made."""
        return [Booking.from_line(text) for text in self._lines(self.bookings_path)]

    def append_booking(self, booking: Booking) -> None:
        with open(self.bookings_path, "a", encoding="utf-8") as handle:
            handle.write(booking.to_line() + "\n")

    def write_bookings(self, bookings: Iterable[Booking]) -> None:
        """Replace the bookings file with the given bookings."""
        with open(self._temp_bookings_path, "w", encoding="utf-8") as handle:
            for booking in bookings:
                handle.write(booking.to_line() + "\n")
        os.replace(self._temp_bookings_path, self.bookings_path)

    @staticmethod
    def _lines(path: Path) -> list[str]:
        with open(path, encoding="utf-8") as handle:
            return [text.rstrip("\r\n") for text in handle if text.strip()]

    @staticmethod
    def _parse_train(text: str) -> Train:
        tokens = text.split()
        if len(tokens) < 4:
            raise ValueError(f"malformed train line: {text!r}")
        try:
            number = int(tokens[0])
        except ValueError as exc:
            raise ValueError(f"malformed train line: {text!r}") from exc
        return Train(
            number=number,
            name=" ".join(tokens[1:-2]),
            source=tokens[-2],
            dest=tokens[-1],
        )

    @staticmethod
    def _parse_seat(text: str) -> SeatDay:
        try:
            values = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError(f"malformed seat line: {text!r}") from exc
        if len(values) != 7:
            raise ValueError(f"malformed seat line: {text!r}")
        return SeatDay(*values)