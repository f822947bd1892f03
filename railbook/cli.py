"""Interactive terminal menus for the reservation system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from .auth import UserStore
from .formatting import booking_details, header, line, train_info
from .models import GREEN, RED, RESET
from .reservations import NoBookingsError, ReservationSystem, TrainNotFoundError
from .storage import Storage

MAX_PASSWORD_RETRIES = 5


def _box(text: str) -> str:
    return f"│ {text:<76} │\n"


def _field(label: str, value: object) -> str:
    return f"│ {label:<15}: {value:<60} │\n"


class Console:
    """Menu-driven front end reading answers from input_func and writing to output."""

    def __init__(
        self,
        system: ReservationSystem,
        users: UserStore,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.system = system
        self.users = users
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text)

    def _error(self, text: str) -> None:
        self._write(f"{RED}{text}{RESET}\n")

    def _failure(self, text: str) -> None:
        self._write(header("ERROR", RED) + _box(text) + line("="))

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        self.output.flush()
        return self.input_func()

    def _ask_word(self, prompt: str) -> str:
        words = self._ask(prompt).split()
        return words[0] if words else ""

    def _choice(self) -> str:
        return self._ask("Enter your choice: ").strip()[:1]

    def _ask_ints(self, prompt: str, count: int) -> list[int] | None:
        words = self._ask(prompt).split()
        try:
            values = [int(word) for word in words[:count]]
        except ValueError:
            values = []
        if len(values) != count:
            self._error("Invalid number!")
            return None
        return values

    def _save(self) -> None:
        self.system.storage.save_trains(self.system.trains)

    def run(self) -> int:
        """Show the main menu until the user exits or input ends; trains are saved on the way out."""
        try:
            while True:
                self._write(header("RAILWAY RESERVATION SYSTEM", GREEN))
                self._write("2. Sign In\n3. Exit\n")
                choice = self._choice()
                if choice == "2":
                    self.sign_in()
                elif choice == "3":
                    break
                else:
                    self._error("Invalid choice!")
        except EOFError:
            pass
        self._save()
        return 0

    def sign_in(self) -> bool:
        """Ask for credentials, allow a few retries, and open the matching menu."""
        self._write(header("ACCOUNT LOGIN", GREEN))
        name = self._ask("Enter the user name: ").strip("\r\n")
        entered = self._ask_word("Enter the password: ")

        try:
            stored = self.users.find_password(name)
        except OSError:
            self._error("Error opening user database!")
            return False
        if stored is None:
            self._error("Account not found. Please create a new account.")
            return False

        attempts = 0
        while entered != stored:
            if attempts == MAX_PASSWORD_RETRIES:
                self._error("Too many failed attempts. Try again later.")
                return False
            self._error(f"Incorrect password. Attempts left: {MAX_PASSWORD_RETRIES - attempts}")
            entered = self._ask_word("Enter the password again: ")
            attempts += 1

        if name == "admin":
            self.admin_menu()
        else:
            self.user_menu(name)
        return True

    def admin_menu(self) -> None:
        while True:
            self._write(header("ADMIN MENU", GREEN))
            self._write("1. Add Trains\n2. View Train Information\n3. Logout\n")
            choice = self._choice()
            if choice == "1":
                self._add_train()
            elif choice == "2":
                self._write(train_info(self.system.trains))
            elif choice == "3":
                return
            else:
                self._error("Invalid choice!")

    def _add_train(self) -> None:
        date = self._ask_ints("Enter the day, month and year for seat information: ", 3)
        if date is None:
            return
        name = self._ask("Enter the train name: ").strip()
        source = self._ask("Enter the source location: ").strip()
        dest = self._ask("Enter the destination location: ").strip()
        self.system.create_train(name, source, dest, *date)
        self._write(header("TRAIN ADDED SUCCESSFULLY", GREEN))
        self._write(train_info(self.system.trains))

    def user_menu(self, username: str) -> None:
        while True:
            self._write(header("USER MENU", GREEN))
            self._write(
                "1. Reserve Ticket\n2. Cancel Ticket\n3. View Booking Details\n"
                "4. View Train Information\n5. Logout\n6. add_train\n"
            )
            choice = self._choice()
            if choice == "1":
                self._reserve(username)
            elif choice == "2":
                self._cancel(username)
            elif choice == "3":
                self._show_bookings(username)
            elif choice == "4":
                self._write(train_info(self.system.trains))
            elif choice == "5":
                return
            elif choice == "6":
                if self._ask_word("only for authorised persons\n") == "admin":
                    self.admin_menu()
                    self._save()
                else:
                    self._write("invalid author\n")
            else:
                self._error("Invalid choice!")

    def _reserve(self, username: str) -> None:
        self._write(header("TICKET RESERVATION", GREEN))
        name = self._ask("Enter your name: ").strip()
        number = self._ask_ints("Enter train number: ", 1)
        if number is None:
            return
        date = self._ask_ints("Enter travel date (dd mm yyyy): ", 3)
        if date is None:
            return
        day, month, year = date
        try:
            result = self.system.reserve(username, name, number[0], day, month, year)
        except TrainNotFoundError as exc:
            self._failure(str(exc))
            return
        except OSError:
            self._error("Error saving booking!")
            return

        if result.waitlisted:
            self._write(
                header("WAITING LIST", GREEN)
                + _box("All seats are booked")
                + _field("Your waitlist position", result.waitlist_position)
                + line("=")
            )
            return
        self._write(
            header("BOOKING CONFIRMED", GREEN)
            + _field("Train Name", result.train.name)
            + f"│ {'Travel Date':<15}: {day:02d}-{month:02d}-{year:<58d} │\n"
            + _field("Seat Number", result.booking.seat_number)
            + _field("Available Seats", result.seat.total_seats)
            + line("=")
        )

    def _cancel(self, username: str) -> None:
        self._write(header("TICKET CANCELLATION", GREEN))
        number = self._ask_ints("Enter train number: ", 1)
        if number is None:
            return
        date = self._ask_ints("Enter travel date (dd mm yyyy): ", 3)
        if date is None:
            return
        try:
            result = self.system.cancel(username, number[0], *date)
        except (TrainNotFoundError, NoBookingsError) as exc:
            self._failure(str(exc))
            return
        except OSError:
            self._failure("Error processing cancellation!")
            return

        parts = [
            header("CANCELLATION CONFIRMED", GREEN),
            _box("Your ticket has been cancelled"),
            _field("Available Seats", result.seat.total_seats),
            _field("Wait List", result.seat.w_list),
        ]
        if result.seat.w_list > 0:
            parts.append(_box("A passenger from waiting list has been accommodated"))
        parts.append(line("="))
        self._write("".join(parts))

    def _show_bookings(self, username: str) -> None:
        try:
            bookings = self.system.bookings_for(username)
        except NoBookingsError:
            self._write(header("BOOKING DETAILS", GREEN) + _box("No bookings found!") + line("="))
            return
        self._write(header("YOUR BOOKINGS", GREEN))
        for booking in bookings:
            self._write(booking_details(booking, self.system.trains))
        if not bookings:
            self._write(_box("No bookings found for this user!") + line("="))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="railbook", description="Railway reservation system.")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)

    storage = Storage(args.data_dir)
    system = ReservationSystem(storage, storage.load_trains())
    users = UserStore(Path(args.data_dir) / "users.dat")
    return Console(system, users).run()


if __name__ == "__main__":
    sys.exit(main())