from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union


@dataclass(frozen=True)
class Booking:
    """
    A single reservation. `booking_date` is when it was made (not the rental
    period) and is None when unparseable; `total_amount` is None when missing.
    """
    booking_id: str
    vehicle_id: str
    user_id: str
    booking_date: Optional[Union[datetime, date]]
    total_amount: Optional[float]
    status: str  # "pending" | "confirmed" | "cancelled" | "completed"

    @property
    def amount(self) -> float:
        """Amount contributed to revenue sums; missing amounts count as 0."""
        return self.total_amount or 0.0
