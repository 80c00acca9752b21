"""
Dashboard reducers over bookings, vehicles and users.

Each function is pure and linear in its inputs. Records whose date could not
be parsed match no window and simply contribute nothing.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable, Sequence

from carhub.models.booking import Booking
from carhub.models.rollup import (
    CategoryCount,
    DailyBookingCount,
    MonthlyRevenue,
    MonthlyUserGrowth,
    VehicleUtilization,
)
from carhub.models.user import User
from carhub.models.vehicle import Vehicle
from carhub.services.common import round2
from carhub.services.time_bucketer import TimeBucketer
from carhub.utils.constants import (
    DAYS_TRAILING,
    MONTHS_TRAILING,
    TOP_VEHICLES_LIMIT,
    BookingStatus,
)


def revenue_by_month(bookings: Iterable[Booking], reference, bucketer: TimeBucketer,
                     months: int = MONTHS_TRAILING) -> list[MonthlyRevenue]:
    """Revenue and booking count per trailing month. Every status counts."""
    windows = bucketer.monthly_windows(reference, months)
    revenue = defaultdict(float)
    counts = Counter()
    for b in bookings:
        key = bucketer.month_key(b.booking_date)
        revenue[key] += b.amount
        counts[key] += 1
    return [MonthlyRevenue(w.label, round2(revenue[w.key]), counts[w.key]) for w in windows]


def utilization_by_vehicle(vehicles: Iterable[Vehicle],
                           bookings: Iterable[Booking]) -> list[VehicleUtilization]:
    """One entry per vehicle, in input order. Only confirmed bookings count."""
    confirmed_count = Counter()
    confirmed_revenue = defaultdict(float)
    for b in bookings:
        if b.status != BookingStatus.CONFIRMED:
            continue
        confirmed_count[b.vehicle_id] += 1
        confirmed_revenue[b.vehicle_id] += b.amount

    return [
        VehicleUtilization(
            vehicle_name=v.name,
            utilization_percent=v.utilization_percent(),
            confirmed_booking_count=confirmed_count[v.vehicle_id],
            revenue=round2(confirmed_revenue.get(v.vehicle_id, 0.0)),
        )
        for v in vehicles
    ]


def top_vehicles(utilization: Sequence[VehicleUtilization],
                 limit: int = TOP_VEHICLES_LIMIT) -> list[VehicleUtilization]:
    # sorted() is stable, so equal revenues keep their input order
    return sorted(utilization, key=lambda u: u.revenue, reverse=True)[:limit]


def daily_bookings(bookings: Iterable[Booking], reference, bucketer: TimeBucketer,
                   days: int = DAYS_TRAILING) -> list[DailyBookingCount]:
    """Bookings made on each of the trailing calendar days."""
    windows = bucketer.daily_windows(reference, days)
    counts = Counter(bucketer.day_key(b.booking_date) for b in bookings)
    return [DailyBookingCount(w.label, counts[w.key]) for w in windows]


def user_growth(users: Iterable[User], reference, bucketer: TimeBucketer,
                months: int = MONTHS_TRAILING) -> list[MonthlyUserGrowth]:
    """New registrations per trailing month."""
    windows = bucketer.monthly_windows(reference, months)
    counts = Counter(bucketer.month_key(u.join_date) for u in users)
    return [MonthlyUserGrowth(w.label, counts[w.key]) for w in windows]


def category_distribution(vehicles: Iterable[Vehicle]) -> list[CategoryCount]:
    """Vehicle count per category, exact string match, first-seen order."""
    # Counter keeps insertion order; most_common() would reorder
    counts = Counter(v.category for v in vehicles)
    return [CategoryCount(category, n) for category, n in counts.items()]
