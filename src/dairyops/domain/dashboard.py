"""Dashboard session: login state and the record managers behind it."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from dairyops.database.factories import create_record_store, resolve_backend
from dairyops.domain.errors import (
    NotAuthenticatedError,
    NotFoundError,
    not_authenticated,
    unknown_entity,
)
from dairyops.domain.farmers import FARMER_PAYMENT_SCHEMA, FARMER_SCHEMA, MILK_TRACKING_SCHEMA
from dairyops.domain.inventory import INVENTORY_SCHEMA
from dairyops.domain.investments import INVESTMENT_SCHEMA
from dairyops.domain.milk_collection import MILK_SALE_SCHEMA, UNSOLD_STOCK_SCHEMA
from dairyops.domain.payments import PAYMENT_SCHEMA
from dairyops.domain.production import MILK_ENTRY_SCHEMA, MILK_PRODUCTION_SCHEMA
from dairyops.domain.records import RecordManager
from dairyops.domain.settings import SETTINGS_SCHEMA

logger = logging.getLogger(__name__)

SCHEMAS = (
    MILK_PRODUCTION_SCHEMA,
    MILK_ENTRY_SCHEMA,
    FARMER_SCHEMA,
    MILK_TRACKING_SCHEMA,
    FARMER_PAYMENT_SCHEMA,
    MILK_SALE_SCHEMA,
    UNSOLD_STOCK_SCHEMA,
    INVENTORY_SCHEMA,
    INVESTMENT_SCHEMA,
    PAYMENT_SCHEMA,
    SETTINGS_SCHEMA,
)


@dataclass
class AuthSession:
    """Who is using the dashboard. There is no credential check."""

    username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    def login(self, username: str) -> None:
        """Authenticate as ``username``.

        Raises:
            ValueError: If username is blank
        """
        username = (username or "").strip()
        if not username:
            raise ValueError("Username is required")
        self.username = username

    def logout(self) -> None:
        self.username = None


class Dashboard:
    """The signed-in dashboard: one record manager per entity.

    Records live only as long as the session. Logging out discards every
    store, and the next login starts from empty lists.
    """

    def __init__(self, backend: Optional[str] = None):
        """Initialize dashboard.

        Args:
            backend: Store backend for every entity (see resolve_backend)
        """
        self.backend = resolve_backend(backend)
        self.session = AuthSession()
        self._managers: dict[str, RecordManager] = {}

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def username(self) -> Optional[str]:
        return self.session.username

    def login(self, username: str) -> None:
        """Log in, opening empty stores if none are open.

        Raises:
            ValueError: If username is blank
        """
        self.session.login(username)
        if not self._managers:
            self._managers = {
                schema.name: RecordManager(schema, create_record_store(schema, self.backend))
                for schema in SCHEMAS
            }
        logger.info("Logged in as %s", self.session.username)

    def logout(self) -> None:
        """Log out and discard all records. Does nothing when logged out."""
        if not self.is_authenticated:
            return
        username = self.session.username
        self.close()
        self.session.logout()
        logger.info("Logged out %s", username)

    def manager(self, name: str) -> RecordManager:
        """Get the record manager for an entity.

        Args:
            name: Schema name (``milk_sale``) or command name (``milk-sales``)

        Raises:
            NotAuthenticatedError: If nobody is logged in
            NotFoundError: If no entity has this name
        """
        if not self.is_authenticated:
            raise NotAuthenticatedError(not_authenticated())

        for manager in self._managers.values():
            if name in (manager.schema.name, manager.schema.command_name):
                return manager
        raise NotFoundError(unknown_entity(name))

    def managers(self) -> list[RecordManager]:
        """All record managers, in menu order.

        Raises:
            NotAuthenticatedError: If nobody is logged in
        """
        if not self.is_authenticated:
            raise NotAuthenticatedError(not_authenticated())
        return list(self._managers.values())

    def overview(self) -> dict[str, Any]:
        """Statistics of every entity, keyed by entity title.

        Raises:
            NotAuthenticatedError: If nobody is logged in
        """
        return {manager.schema.title: manager.statistics() for manager in self.managers()}

    def close(self) -> None:
        """Close every store and drop the managers."""
        for manager in self._managers.values():
            manager.store.close()
        self._managers = {}
