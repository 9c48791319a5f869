"""
Flat-file storage for customer records.

This module provides the data-access service used by the customer
endpoints.  The whole customer list lives in a single JSON file which
is read completely on every request and rewritten completely on every
change; there is no caching, locking or partial write.

``init_storage`` and ``close_storage`` are called from the
application's startup and shutdown events.  Routes obtain the service
through the ``get_data_service`` FastAPI dependency, which tests
override to point at a temporary file.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from .config import settings
from ..schemas.customer import Customer


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the backing file cannot be read, parsed or written."""


def get_data_file_path() -> str:
    """Compute the path to the customer data file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    data_file = settings.data_file
    if os.path.isabs(data_file):
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / data_file).resolve())


class JsonFileDataService:
    """Reads and writes the full customer list as one JSON document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.is_open = False

    def open(self) -> None:
        """Create the data file (holding an empty list) if it is missing."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
            logger.info("Created empty customer file %s", self.path)
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def _ensure_open(self) -> None:
        if not self.is_open:
            raise StorageError(f"Customer store {self.path} is not open")

    def read_customers(self) -> List[Customer]:
        """Return every customer stored in the file.

        A missing file reads as an empty list.  The document may be a
        bare JSON array or an object with a ``customers`` array.
        """
        self._ensure_open()
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Malformed JSON in {self.path}: {exc}") from exc
        if isinstance(data, dict):
            if "customers" not in data:
                raise StorageError(f"No customers array in {self.path}")
            data = data["customers"]
        if not isinstance(data, list):
            raise StorageError(f"Expected a list of customers in {self.path}")
        try:
            customers = [Customer.model_validate(item) for item in data]
        except ValidationError as exc:
            raise StorageError(f"Invalid customer record in {self.path}: {exc}") from exc
        logger.debug("Read %d customers from %s", len(customers), self.path)
        return customers

    def save_customers(self, customers: List[Customer]) -> None:
        """Overwrite the file with ``customers``."""
        self._ensure_open()
        data = [customer.model_dump() for customer in customers]
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Wrote %d customers to %s", len(customers), self.path)


_data_service: Optional[JsonFileDataService] = None


def init_storage(path: Optional[str] = None) -> JsonFileDataService:
    """Open the process-wide data service, creating the file if needed."""
    global _data_service
    _data_service = JsonFileDataService(path or get_data_file_path())
    _data_service.open()
    return _data_service


def close_storage() -> None:
    global _data_service
    if _data_service is not None:
        _data_service.close()
        _data_service = None


def get_data_service() -> JsonFileDataService:
    """FastAPI dependency returning the process-wide data service.

    Opens the service lazily when the application was not started
    through its startup event (for example under a bare TestClient).
    """
    if _data_service is None:
        return init_storage()
    return _data_service
