"""Shared service helpers and dict -> record mappers."""

from typing import Optional

from carhub.models.booking import Booking
from carhub.models.store import Store
from carhub.models.user import User
from carhub.models.vehicle import Vehicle
from carhub.utils.filters import parse_instant


def _store() -> Store:
    """Get the singleton store instance."""
    return Store.instance()


# -------- math helpers --------
def round2(x: float) -> float:
    return round(float(x), 2)


def to_float_safe(value) -> Optional[float]:
    """Safely convert to float; return None if invalid (bools and NaN included)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    if f != f or f in (float("inf"), float("-inf")):
        return None
    return f


def to_int_safe(value, default: int = 0) -> int:
    """Safely convert to int; return `default` if invalid."""
    f = to_float_safe(value)
    return int(f) if f is not None else default


def _text(value) -> str:
    return "" if value is None else str(value)


# -------- dict -> record mappers --------
# Field names follow the backend/cache JSON shape; snake_case aliases are accepted too.
def booking_from_dict(d: Optional[dict]) -> Optional[Booking]:
    """Map a stored booking dict to a Booking; never raises on bad fields."""
    if not isinstance(d, dict):
        return None
    return Booking(
        booking_id=_text(d.get("id") or d.get("booking_id")),
        vehicle_id=_text(d.get("carId") or d.get("vehicleId") or d.get("vehicle_id")),
        user_id=_text(d.get("userId") or d.get("user_id")),
        booking_date=parse_instant(d.get("bookingDate", d.get("booking_date"))),
        total_amount=to_float_safe(d.get("totalAmount", d.get("total_amount"))),
        status=_text(d.get("status")),
    )


def vehicle_from_dict(d: Optional[dict]) -> Optional[Vehicle]:
    """
    Map a stored vehicle dict to a Vehicle; category is kept verbatim.
    A missing or invalid `available` means nothing is known to be rented out.
    """
    if not isinstance(d, dict):
        return None
    quantity = to_int_safe(d.get("quantity"))
    return Vehicle(
        vehicle_id=_text(d.get("id") or d.get("vehicle_id")),
        name=_text(d.get("name")),
        category=_text(d.get("category")),
        quantity=quantity,
        available=to_int_safe(d.get("available"), default=quantity),
    )


def user_from_dict(d: Optional[dict]) -> Optional[User]:
    """Map a stored user dict to a User."""
    if not isinstance(d, dict):
        return None
    return User(
        user_id=_text(d.get("id") or d.get("user_id")),
        join_date=parse_instant(d.get("joinDate", d.get("join_date"))),
    )


def coerce_records(items, record_type, mapper) -> list:
    """
    Accept typed records or raw dicts; drop entries that are neither.
    Order is preserved.
    """
    out = []
    for item in items or ():
        if isinstance(item, record_type):
            out.append(item)
            continue
        rec = mapper(item)
        if rec is not None:
            out.append(rec)
    return out
