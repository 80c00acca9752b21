"""
Integration tests for the admin analytics JSON endpoints via the Flask test client.
"""

import pytest

from carhub import create_app
from carhub.exceptions import ConfigurationError


@pytest.fixture
def seeded(store):
    store.put("adminCars", [
        {"id": "v1", "name": "Swift", "category": "compact", "quantity": 2, "available": 1},
        {"id": "v2", "name": "Creta", "category": "suv", "quantity": 0, "available": 0},
    ])
    store.put("bookings", [
        {"id": "b1", "carId": "v1", "userId": "u1", "totalAmount": 100,
         "status": "confirmed", "bookingDate": "2025-06-10T10:00:00Z"},
        {"id": "b2", "carId": "v2", "userId": "u2", "totalAmount": 40,
         "status": "pending", "bookingDate": "2025-05-10T10:00:00Z"},
    ])
    store.put("adminUsers", [{"id": "u1", "joinDate": "2025-06-01"}])
    return store


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


def test_admin_analytics_returns_rollup_and_summary(client, seeded):
    r = client.get("/api/admin/analytics?at=2025-06-15T12:00:00Z")
    assert r.status_code == 200
    body = r.get_json()
    rollup = body["rollup"]
    assert len(rollup["monthlyRevenue"]) == 12
    assert len(rollup["dailyBookingCounts"]) == 30
    assert len(rollup["monthlyUserGrowth"]) == 12
    assert rollup["monthlyRevenue"][-1] == {"monthLabel": "Jun", "revenue": 100.0, "bookingCount": 1}
    assert rollup["monthlyUserGrowth"][-1]["newUserCount"] == 1
    assert rollup["topVehicles"][0]["vehicleName"] == "Swift"
    assert body["summary"]["revenue_growth_percent"] == 150.0
    assert body["summary"]["average_utilization"] == 25


def test_admin_analytics_on_empty_store(client):
    r = client.get("/api/admin/analytics")
    assert r.status_code == 200
    rollup = r.get_json()["rollup"]
    assert len(rollup["monthlyRevenue"]) == 12
    assert rollup["categoryDistribution"] == []


def test_summary_endpoint(client, seeded):
    r = client.get("/api/admin/analytics/summary?at=2025-06-15")
    assert r.status_code == 200
    assert r.get_json()["current_month_revenue"] == 100.0


def test_bad_reference_time_is_rejected(client):
    r = client.get("/api/admin/analytics?at=next-tuesday")
    assert r.status_code == 400
    assert "next-tuesday" in r.get_json()["error"]


def test_timezone_config_shifts_buckets(store):
    store.put("bookings", [{"carId": "v1", "totalAmount": 10, "status": "pending",
                            "bookingDate": "2025-06-30T23:30:00Z"}])
    app = create_app({"TESTING": True, "DATA_PATH": store.path,
                      "ANALYTICS_TIMEZONE": "Pacific/Auckland"})
    with app.test_client() as c:
        rollup = c.get("/api/admin/analytics?at=2025-07-02T00:00:00Z").get_json()["rollup"]
    assert rollup["monthlyRevenue"][-1]["monthLabel"] == "Jul"
    assert rollup["monthlyRevenue"][-1]["bookingCount"] == 1


def test_unknown_timezone_fails_app_creation(store):
    with pytest.raises(ConfigurationError):
        create_app({"DATA_PATH": store.path, "ANALYTICS_TIMEZONE": "Mars/Olympus"})


def test_prefixed_environment_overrides_defaults(store, monkeypatch):
    monkeypatch.setenv("CARHUB_ANALYTICS_TIMEZONE", "Asia/Kolkata")
    monkeypatch.setenv("CARHUB_LOG_LEVEL", "WARNING")
    app = create_app({"DATA_PATH": store.path})
    assert app.config["ANALYTICS_TIMEZONE"] == "Asia/Kolkata"
    assert app.config["TZ"].zone == "Asia/Kolkata"
    assert app.config["LOG_LEVEL"] == "WARNING"


def test_explicit_overrides_beat_environment(store, monkeypatch):
    monkeypatch.setenv("CARHUB_ANALYTICS_TIMEZONE", "Mars/Olympus")
    app = create_app({"DATA_PATH": store.path, "ANALYTICS_TIMEZONE": "UTC"})
    assert app.config["TZ"].zone == "UTC"
