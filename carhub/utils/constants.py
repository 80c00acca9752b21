# carhub/utils/constants.py

"""
Global constants for booking statuses, store keys and rollup window sizes.
These constants are imported by both models and services.
"""

# Date format (date-only booking/join dates)
DATE_FMT = "%Y-%m-%d"


class BookingStatus:
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class StoreKey:
    BOOKINGS = "bookings"
    VEHICLES = "adminCars"
    USERS = "adminUsers"


# --- Rollup windows ---
MONTHS_TRAILING = 12
DAYS_TRAILING = 30
TOP_VEHICLES_LIMIT = 5

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
