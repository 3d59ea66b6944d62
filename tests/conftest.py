"""Shared pytest fixtures for dairyops tests."""

import logging

import pytest

from dairyops.database.factories import create_record_store
from dairyops.domain.dashboard import Dashboard
from dairyops.domain.farmers import FARMER_SCHEMA
from dairyops.domain.inventory import INVENTORY_SCHEMA
from dairyops.domain.investments import INVESTMENT_SCHEMA
from dairyops.domain.milk_collection import MILK_SALE_SCHEMA
from dairyops.domain.payments import PAYMENT_SCHEMA
from dairyops.domain.records import RecordManager
from dairyops.domain.settings import SETTINGS_SCHEMA


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DAIRYOPS_* variables of the calling shell out of the tests."""
    for name in ("DAIRYOPS_STORE", "DAIRYOPS_LOG_LEVEL", "DAIRYOPS_USER"):
        monkeypatch.delenv(name, raising=False)
    yield
    # CLI runs attach a handler bound to the runner's captured stderr
    logger = logging.getLogger("dairyops")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(params=["memory", "sqlalchemy"])
def backend(request):
    """Run the test against every record store backend."""
    return request.param


@pytest.fixture
def make_manager(backend):
    """Create RecordManagers backed by fresh stores, closed after the test."""
    stores = []

    def factory(schema):
        store = create_record_store(schema, backend)
        stores.append(store)
        return RecordManager(schema, store)

    yield factory

    for store in stores:
        store.close()


@pytest.fixture
def farmer_manager(make_manager):
    return make_manager(FARMER_SCHEMA)


@pytest.fixture
def milk_sale_manager(make_manager):
    return make_manager(MILK_SALE_SCHEMA)


@pytest.fixture
def inventory_manager(make_manager):
    return make_manager(INVENTORY_SCHEMA)


@pytest.fixture
def investment_manager(make_manager):
    return make_manager(INVESTMENT_SCHEMA)


@pytest.fixture
def payment_manager(make_manager):
    return make_manager(PAYMENT_SCHEMA)


@pytest.fixture
def settings_manager(make_manager):
    return make_manager(SETTINGS_SCHEMA)


@pytest.fixture
def submit_form():
    """Fill a manager's draft field by field, then submit it."""

    def submit(manager, **values):
        for name, value in values.items():
            manager.set_field(name, value)
        return manager.submit()

    return submit


@pytest.fixture
def dashboard(backend):
    """Create a dashboard logged in as 'admin'."""
    board = Dashboard(backend=backend)
    board.login("admin")
    yield board
    board.close()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
