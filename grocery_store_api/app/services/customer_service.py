"""
Service layer for customers.

All operations work on the complete customer list: it is loaded once
per call through the injected data-access service, changed in memory
and, for create and update, written back in full.  Identifiers are
supplied by callers and their uniqueness is not checked; lookups
return the first matching record.

A storage read failure is logged and then treated like an empty store
by list, get and update, so callers see "not found" in both cases.
Create lets the failure propagate instead of appending to an empty list
and overwriting a file it could not read.  Write failures propagate.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from grocery_store_api.app.core.storage import JsonFileDataService, StorageError
from grocery_store_api.app.schemas.customer import Customer


logger = logging.getLogger(__name__)


class CustomerService:
    """Customer operations on top of a data-access service."""

    def __init__(self, data_service: JsonFileDataService) -> None:
        self.data_service = data_service

    def _load_customers(self) -> List[Customer]:
        try:
            return self.data_service.read_customers()
        except StorageError as exc:
            logger.warning("Could not load customers, treating store as empty: %s", exc)
            return []

    @staticmethod
    def _find(customers: List[Customer], customer_id: int) -> Optional[Customer]:
        return next((c for c in customers if c.id == customer_id), None)

    async def list_customers(self) -> List[Customer]:
        """Return all customers; an empty list means nothing to show."""
        return self._load_customers()

    async def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Return the first customer with ``customer_id`` or ``None``."""
        return self._find(self._load_customers(), customer_id)

    async def create_customer(self, customer: Customer) -> Customer:
        """Append ``customer`` to the stored list and persist it.

        Raises ``StorageError`` when the stored list cannot be read.
        """
        customers = self.data_service.read_customers()
        customers.append(customer)
        self.data_service.save_customers(customers)
        logger.info("Created customer %s", customer.id)
        return customer

    async def update_customer(self, customer_id: int, data: Customer) -> Optional[Customer]:
        """Rename the customer with ``customer_id``.

        Only ``name`` is copied from ``data``; its ``id`` is ignored.
        Returns the updated record, or ``None`` when no customer
        matches, in which case nothing is written.
        """
        customers = self._load_customers()
        customer = self._find(customers, customer_id)
        if customer is None:
            return None
        customer.name = data.name
        self.data_service.save_customers(customers)
        logger.info("Updated customer %s", customer_id)
        return customer
