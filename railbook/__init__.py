"""Terminal railway reservation system: trains, seats, bookings and waiting lists."""

__version__ = "0.1.0"
__all__ = ["__version__"]