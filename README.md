# railbook

A small railway reservation system that runs in the terminal. Users sign in,
reserve and cancel tickets, and view their bookings. An administrator adds
trains, and each new train gets seats for three consecutive travel days.

## Installing

```
pip install .
```

## Running

```
railbook
railbook --data-dir path/to/data
```

The data files are kept in plain text in the directory given by `--data-dir`,
which defaults to the current directory:

- `users.dat`: whitespace-separated `name password` pairs, read when signing in
- `trains.dat`: one line per train: number, name, source and destination
- `seats.dat`: three seat-day lines per train: day, month, year, available
  seats, waiting-list count and two status fields
- `bookings.dat`: one line per booked ticket

The main menu offers `2. Sign In` and `3. Exit`. The trains are saved when the
program exits, and also when input ends.

Signing in as `admin` opens the admin menu, which can add trains and list
them. Any other user gets the user menu:

1. Reserve Ticket: books the next free seat, or joins the waiting list when
   all 100 seats of that day are taken
2. Cancel Ticket: removes all your bookings for a train and date; for each one
   the waiting list shrinks by one, or, when it is empty, a seat is freed
3. View Booking Details
4. View Train Information
5. Logout
6. add_train: opens the admin menu after the word `admin` is entered

After a wrong password the user gets five more tries.

## What it does not do

There is no way to create an account from the program: `users.dat` has to be
written by hand, for example

```
admin password
alice password
```

Passwords are stored and compared as plain text. The function
`railbook.passwords.check_password` tells whether a password has a lower-case
letter, an upper-case letter, a digit and a special character, but sign-in
does not use it.

## Using it from Python

```python
from railbook.storage import Storage
from railbook.reservations import ReservationSystem

storage = Storage(".")
system = ReservationSystem(storage, storage.load_trains())
train = system.create_train("Express", "North", "South", 1, 5, 2025, 100123)
result = system.reserve("alice", "Alice", train.number, 1, 5, 2025)
print(result.booking.seat_number, result.waitlisted)
print(system.bookings_for("alice"))
system.cancel("alice", train.number, 1, 5, 2025)
```

`create_train` picks a random train number when none is given. Reserving or
cancelling on a train or date that does not exist raises
`TrainNotFoundError`. Cancelling when no bookings file exists, or when the
user has no booking on that train and date, raises `NoBookingsError`;
`bookings_for` raises it when no bookings file exists.

The text blocks shown by the terminal menus come from `railbook.formatting`
(`header`, `line`, `train_row`, `train_info`, `booking_details`), each of
which returns a string.

## Tests

```
pip install .[test]
pytest
```