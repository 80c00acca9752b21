from datetime import datetime, timedelta, timezone

from carhub import create_app
from carhub.models.store import Store
from carhub.utils.constants import BookingStatus, StoreKey

DEMO_VEHICLES = [
    {"id": "v1", "name": "Toyota Corolla", "category": "compact", "quantity": 4, "available": 2},
    {"id": "v2", "name": "Honda City", "category": "sedan", "quantity": 3, "available": 1},
    {"id": "v3", "name": "Mahindra XUV700", "category": "suv", "quantity": 2, "available": 2},
    {"id": "v4", "name": "BMW 5 Series", "category": "luxury", "quantity": 1, "available": 0},
]


def _iso(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def demo_users(now: datetime) -> list[dict]:
    return [
        {"id": f"u{i}", "name": f"Customer {i}", "joinDate": _iso(now - timedelta(days=25 * i))}
        for i in range(1, 9)
    ]


def demo_bookings(now: datetime) -> list[dict]:
    statuses = [BookingStatus.CONFIRMED, BookingStatus.COMPLETED,
                BookingStatus.PENDING, BookingStatus.CANCELLED]
    rows = []
    for i in range(24):
        vehicle = DEMO_VEHICLES[i % len(DEMO_VEHICLES)]
        rows.append({
            "id": f"b{i + 1}",
            "carId": vehicle["id"],
            "userId": f"u{i % 8 + 1}",
            "bookingDate": _iso(now - timedelta(days=13 * i)),
            "totalAmount": 1500 + 250 * (i % 5),
            "status": statuses[i % len(statuses)],
        })
    return rows


def main():
    """
    Populate the store with demo vehicles, users and bookings.
    Existing documents are kept unless empty (idempotent).
    """
    create_app()
    store = Store.instance()
    now = datetime.now(timezone.utc)

    if not store.get(StoreKey.VEHICLES):
        store.put(StoreKey.VEHICLES, DEMO_VEHICLES)
    if not store.get(StoreKey.USERS):
        store.put(StoreKey.USERS, demo_users(now))
    if not store.get(StoreKey.BOOKINGS):
        store.put(StoreKey.BOOKINGS, demo_bookings(now))

    store.save()

    print("✅ Seed complete.")
    print("📊 Analytics: GET /api/admin/analytics")


if __name__ == "__main__":
    main()
