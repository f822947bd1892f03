"""Text rendering for the terminal interface; every function returns newline-terminated text."""

from __future__ import annotations

from collections.abc import Iterable

from .models import BOX_WIDTH, GREEN, MAX_SEATS, RESET, Booking, Train


def line(char: str, length: int = BOX_WIDTH) -> str:
    """A green rule made of one repeated character."""
    return f"{GREEN}{char * length}{RESET}\n"


def header(title: str, color: str = GREEN) -> str:
    """A centred, coloured title between two rules."""
    spaces = max(0, (BOX_WIDTH - len(title)) // 2)
    pad = " " * spaces
    return "\n" + line("=") + f"{pad}{color}{title}{pad}\n" + line("=")


def train_row(train: Train) -> str:
    """One table row describing a train's number and route."""
    return (
        f"│ {train.number:<10d} │ {train.name:<25} │ {train.source:<15} │ {train.dest:<15} │\n"
        + line("-")
    )


def train_info(trains: Iterable[Train]) -> str:
    """The train table followed by seat information for every date."""
    trains = list(trains)
    parts = [
        header("AVAILABLE TRAINS", GREEN),
        f"│ {'Train No.':<10} │ {'Train Name':<25} │ {'Source':<15} │ {'Destination':<15} │\n",
        line("-"),
    ]
    if not trains:
        parts.append(f"│ {'No trains are available':<76} │\n")
        parts.append(line("-"))
        return "".join(parts)

    parts.extend(train_row(train) for train in trains)
    parts.append(header("SEATS INFORMATION", GREEN))
    for train in trains:
        parts.append(f"│ {'Train Number':<15}: {train.number:<60d} │\n")
        parts.append(f"│ {'Train Name':<15}: {train.name:<60} │\n")
        parts.append(line("-"))
        for seat in train.schedule:
            parts.append(
                f"│ {'Date':<10}: {seat.day:02d}-{seat.month:02d}-{seat.year:<62d} │\n"
            )
            parts.append(f"│ {'Total Seats':<10}: {MAX_SEATS:<65d} │\n")
            parts.append(f"│ {'Available Seats':<10}: {seat.total_seats:<65d} │\n")
            parts.append(f"│ {'Wait List':<10}: {seat.w_list:<65d} │\n")
            parts.append(line("-"))
    return "".join(parts)


def booking_details(booking: Booking, trains: Iterable[Train]) -> str:
    """A block describing one booking, with the train name looked up among the trains."""
    train_name = next(
        (train.name for train in trains if train.number == booking.train_number),
        "Unknown",
    )
    return "".join(
        [
            line("-"),
            f"│ {'Passenger Name':<15}: {booking.name:<60} │\n",
            f"│ {'Train Number':<15}: {booking.train_number:<60d} │\n",
            f"│ {'Train Name':<15}: {train_name:<60} │\n",
            f"│ {'Travel Date':<15}: {booking.day:02d}-{booking.month:02d}-{booking.year:<58d} │\n",
            f"│ {'Seat Number':<15}: {booking.seat_number:<60d} │\n",
            line("-"),
        ]
    )