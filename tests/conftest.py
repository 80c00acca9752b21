import os, sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
os.environ.setdefault("APP_ENV", "test")

from datetime import datetime

import pytest
import pytz

REF = datetime(2025, 6, 15, 12, 0, tzinfo=pytz.UTC)


@pytest.fixture
def ref():
    """Fixed reference instant: 2025-06-15 12:00 UTC."""
    return REF


@pytest.fixture
def store(tmp_path):
    """
    Fresh singleton Store backed by a temp JSON file, so tests never touch
    the developer's data.json.
    """
    from carhub.models.store import Store
    Store.reset_instance()
    st = Store.instance(tmp_path / "data.json")
    yield st
    Store.reset_instance()


@pytest.fixture
def app(store):
    from carhub import create_app
    app = create_app({"TESTING": True, "DATA_PATH": store.path, "SECRET_KEY": "test"})
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
