"""Train creation, seat reservation, cancellation and booking lookup."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .models import DAYS_PER_TRAIN, MAX_SEATS, Booking, SeatDay, Train
from .storage import Storage


class TrainNotFoundError(LookupError):
    """No train with the given number runs on the given date."""


class NoBookingsError(LookupError):
    """There is no booking to show or cancel."""


@dataclass(frozen=True)
class ReservationResult:
    """Outcome of a reservation: either a confirmed seat or a waiting-list place."""

    train: Train
    seat: SeatDay
    booking: Booking | None = None
    waitlist_position: int | None = None

    @property
    def waitlisted(self) -> bool:
        return self.booking is None


@dataclass(frozen=True)
class CancellationResult:
    """Outcome of a cancellation: the seat record after the change and the removed bookings."""

    train: Train
    seat: SeatDay
    cancelled: tuple[Booking, ...]


class ReservationSystem:
    """The trains in service together with the storage that persists them."""

    def __init__(self, storage: Storage, trains: Iterable[Train] | None = None) -> None:
        self.storage = storage
        self.trains: list[Train] = list(trains) if trains is not None else []

    def _save(self) -> None:
        self.storage.save_trains(self.trains)

    def _locate(self, train_number: int, day: int, month: int, year: int) -> tuple[Train, SeatDay]:
        for train in self.trains:
            if train.number == train_number:
                seat = train.schedule_for(day, month, year)
                if seat is not None:
                    return train, seat
        raise TrainNotFoundError("Train or date not found!")

    def create_train(
        self,
        name: str,
        source: str,
        dest: str,
        day: int,
        month: int,
        year: int,
        number: int | None = None,
    ) -> Train:
        """Add a train running on consecutive days from the given date; it goes first in the list."""
        if number is None:
            number = random.randrange(10000) + 99999
        schedule = [SeatDay(day + offset, month, year) for offset in range(DAYS_PER_TRAIN)]
        train = Train(number=number, name=name, source=source, dest=dest, schedule=schedule)
        self.trains.insert(0, train)
        self._save()
        return train

    def reserve(
        self, username: str, name: str, train_number: int, day: int, month: int, year: int
    ) -> ReservationResult:
        """Book the next free seat, or join the waiting list when the train is full."""
        train, seat = self._locate(train_number, day, month, year)
        if seat.total_seats > 0:
            booking = Booking(
                username=username,
                train_number=train_number,
                train_name=train.name,
                day=day,
                month=month,
                year=year,
                seat_number=MAX_SEATS - seat.total_seats + 1,
                name=name,
            )
            self.storage.append_booking(booking)
            seat.total_seats -= 1
            self._save()
            return ReservationResult(train=train, seat=seat, booking=booking)
        seat.w_list += 1
        self._save()
        return ReservationResult(train=train, seat=seat, waitlist_position=seat.w_list)

    def cancel(
        self, username: str, train_number: int, day: int, month: int, year: int
    ) -> CancellationResult:
        """Remove the user's bookings on that train and date, freeing seats or the waiting list."""
        train, seat = self._locate(train_number, day, month, year)
        try:
            bookings = self.storage.read_bookings()
        except FileNotFoundError as exc:
            raise NoBookingsError("No bookings found!") from exc

        wanted = (day, month, year)
        kept: list[Booking] = []
        cancelled: list[Booking] = []
        for booking in bookings:
            matches = (
                booking.username == username
                and booking.train_number == train_number
                and (booking.day, booking.month, booking.year) == wanted
            )
            (cancelled if matches else kept).append(booking)

        if not cancelled:
            raise NoBookingsError("No matching booking found!")

        for _ in cancelled:
            if seat.w_list > 0:
                seat.w_list -= 1
            else:
                seat.total_seats += 1
        self.storage.write_bookings(kept)
        self._save()
        return CancellationResult(train=train, seat=seat, cancelled=tuple(cancelled))

    def bookings_for(self, username: str) -> list[Booking]:
        """The user's bookings; raises NoBookingsError when no booking was ever stored."""
        try:
            bookings = self.storage.read_bookings()
        except FileNotFoundError as exc:
            raise NoBookingsError("No bookings found!") from exc
        return [booking for booking in bookings if booking.username == username]