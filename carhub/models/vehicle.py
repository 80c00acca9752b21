import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    """
    Fleet entry as held by the admin car list. `quantity` is the number of
    owned units and `available` how many are not currently rented out.
    """
    vehicle_id: str
    name: str
    category: str  # open set, e.g. "compact" | "sedan" | "suv" | "luxury" | "sports"
    quantity: int
    available: int

    def utilization_percent(self) -> int:
        """
        Share of the inventory currently rented out, rounded half-up to a whole
        percent. Zero-quantity vehicles report 0.
        """
        if self.quantity <= 0:
            return 0
        rented = self.quantity - self.available
        pct = math.floor(100 * rented / self.quantity + 0.5)
        return max(0, min(100, pct))
