from __future__ import annotations

import math
from datetime import date, datetime
from typing import Iterable

from carhub.exceptions import InvalidReferenceTimeError
from carhub.logging_config import get_logger
from carhub.models.booking import Booking
from carhub.models.rollup import RollupResult
from carhub.models.user import User
from carhub.models.vehicle import Vehicle
from carhub.services import aggregators
from carhub.services.common import (
    _store,
    booking_from_dict,
    coerce_records,
    round2,
    user_from_dict,
    vehicle_from_dict,
)
from carhub.services.time_bucketer import TimeBucketer
from carhub.utils.constants import StoreKey
from carhub.utils.filters import now_in, parse_instant

logger = get_logger(__name__)


class RollupEngine:
    """Orchestrates the dashboard aggregators into one RollupResult."""

    def __init__(self, tz=None):
        self.bucketer = TimeBucketer(tz)

    @property
    def tz(self):
        return self.bucketer.tz

    def compute(self, bookings: Iterable, vehicles: Iterable, users: Iterable,
                reference=None) -> RollupResult:
        """
        Build every rollup for `reference` (defaults to now in the engine's
        timezone; ISO strings are parsed and an unparseable one raises
        InvalidReferenceTimeError). Inputs may be typed records or raw dicts in the backend
        JSON shape; the same inputs and reference always give an equal result.
        """
        if reference is None:
            reference = now_in(self.tz)
        elif not isinstance(reference, (datetime, date)):
            parsed = parse_instant(reference)
            if parsed is None:
                raise InvalidReferenceTimeError(f"Error: cannot parse reference time {reference!r}")
            reference = parsed

        booking_rows = coerce_records(bookings, Booking, booking_from_dict)
        vehicle_rows = coerce_records(vehicles, Vehicle, vehicle_from_dict)
        user_rows = coerce_records(users, User, user_from_dict)

        undated = sum(1 for b in booking_rows if b.booking_date is None) + \
            sum(1 for u in user_rows if u.join_date is None)
        if undated:
            logger.debug("Skipping %d undated record(s) in time-bucketed rollups", undated)

        utilization = aggregators.utilization_by_vehicle(vehicle_rows, booking_rows)
        result = RollupResult(
            monthly_revenue=tuple(aggregators.revenue_by_month(booking_rows, reference, self.bucketer)),
            vehicle_utilization=tuple(utilization),
            top_vehicles=tuple(aggregators.top_vehicles(utilization)),
            daily_booking_counts=tuple(aggregators.daily_bookings(booking_rows, reference, self.bucketer)),
            monthly_user_growth=tuple(aggregators.user_growth(user_rows, reference, self.bucketer)),
            category_distribution=tuple(aggregators.category_distribution(vehicle_rows)),
        )
        logger.debug(
            "Rollup computed: bookings=%d vehicles=%d users=%d",
            len(booking_rows), len(vehicle_rows), len(user_rows),
        )
        return result


def growth_percent(current: float, previous: float) -> float:
    """Month-over-month change in percent; 0.0 when there is no prior revenue."""
    if not previous:
        return 0.0
    return round((current - previous) / previous * 100, 1)


def dashboard_summary(result: RollupResult) -> dict:
    """Headline figures shown above the dashboard charts."""
    months = result.monthly_revenue
    current = months[-1] if months else None
    previous = months[-2] if len(months) > 1 else None

    utilization = result.vehicle_utilization
    if utilization:
        mean = sum(u.utilization_percent for u in utilization) / len(utilization)
        average_utilization = math.floor(mean + 0.5)
    else:
        average_utilization = 0

    top = result.top_vehicles[0] if result.top_vehicles else None
    return {
        "current_month_revenue": current.revenue if current else 0.0,
        "current_month_bookings": current.booking_count if current else 0,
        "revenue_growth_percent": growth_percent(
            current.revenue if current else 0.0,
            previous.revenue if previous else 0.0,
        ),
        "average_utilization": average_utilization,
        "top_performer": {"name": top.vehicle_name, "revenue": round2(top.revenue)} if top else None,
    }


class AnalyticsService:
    """Entry points used by the controllers and scripts."""

    @staticmethod
    def compute(bookings, vehicles, users, reference=None, tz=None) -> RollupResult:
        return RollupEngine(tz).compute(bookings, vehicles, users, reference)

    @staticmethod
    def load_collections(store=None) -> tuple[list, list, list]:
        """Read the three raw collections from the document store."""
        store = store or _store()
        collections = []
        for key in (StoreKey.BOOKINGS, StoreKey.VEHICLES, StoreKey.USERS):
            value = store.get(key, [])
            if not isinstance(value, list):
                logger.warning("Store document %r is not a list; treating as empty", key)
                value = []
            collections.append(value)
        return collections[0], collections[1], collections[2]

    @staticmethod
    def rollup_from_store(reference=None, tz=None, store=None) -> RollupResult:
        bookings, vehicles, users = AnalyticsService.load_collections(store)
        return AnalyticsService.compute(bookings, vehicles, users, reference, tz)

    @staticmethod
    def dashboard(reference=None, tz=None, store=None) -> dict:
        """Rollup plus headline summary, ready for JSON."""
        result = AnalyticsService.rollup_from_store(reference, tz, store)
        return {"rollup": result.to_dict(), "summary": dashboard_summary(result)}

