"""Travel booking API: users, vacation packages, resorts and paid bookings."""

__version__ = "0.4.0"
