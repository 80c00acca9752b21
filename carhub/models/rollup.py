"""Immutable result types produced by the rollup engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyRevenue:
    month_label: str
    revenue: float
    booking_count: int

    def to_dict(self) -> dict:
        return {"monthLabel": self.month_label, "revenue": self.revenue,
                "bookingCount": self.booking_count}


@dataclass(frozen=True)
class VehicleUtilization:
    vehicle_name: str
    utilization_percent: int
    confirmed_booking_count: int
    revenue: float

    def to_dict(self) -> dict:
        return {
            "vehicleName": self.vehicle_name,
            "utilizationPercent": self.utilization_percent,
            "confirmedBookingCount": self.confirmed_booking_count,
            "revenue": self.revenue,
        }


@dataclass(frozen=True)
class DailyBookingCount:
    day_label: str
    booking_count: int

    def to_dict(self) -> dict:
        return {"dayLabel": self.day_label, "bookingCount": self.booking_count}


@dataclass(frozen=True)
class MonthlyUserGrowth:
    month_label: str
    new_user_count: int

    def to_dict(self) -> dict:
        return {"monthLabel": self.month_label, "newUserCount": self.new_user_count}


@dataclass(frozen=True)
class CategoryCount:
    category: str
    vehicle_count: int

    def to_dict(self) -> dict:
        return {"category": self.category, "vehicleCount": self.vehicle_count}


@dataclass(frozen=True)
class RollupResult:
    """
    Snapshot of every dashboard rollup for one reference instant.
    Sequences are tuples so a result cannot be mutated after compute().
    """
    monthly_revenue: tuple[MonthlyRevenue, ...]
    vehicle_utilization: tuple[VehicleUtilization, ...]
    top_vehicles: tuple[VehicleUtilization, ...]
    daily_booking_counts: tuple[DailyBookingCount, ...]
    monthly_user_growth: tuple[MonthlyUserGrowth, ...]
    category_distribution: tuple[CategoryCount, ...]

    def to_dict(self) -> dict:
        """JSON-ready form keyed the way the dashboard reads it."""
        return {
            "monthlyRevenue": [m.to_dict() for m in self.monthly_revenue],
            "vehicleUtilization": [v.to_dict() for v in self.vehicle_utilization],
            "topVehicles": [v.to_dict() for v in self.top_vehicles],
            "dailyBookingCounts": [d.to_dict() for d in self.daily_booking_counts],
            "monthlyUserGrowth": [u.to_dict() for u in self.monthly_user_growth],
            "categoryDistribution": [c.to_dict() for c in self.category_distribution],
        }
