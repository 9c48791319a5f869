"""Shared fixtures: a temporary customer file wired into the app."""

import json
from pathlib import Path
from typing import Iterator, List

import pytest
from fastapi.testclient import TestClient

from grocery_store_api.app.core.storage import JsonFileDataService, get_data_service
from grocery_store_api.app.main import app


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "customers.json"


@pytest.fixture
def data_service(data_file: Path) -> JsonFileDataService:
    service = JsonFileDataService(data_file)
    service.open()
    return service


@pytest.fixture
def client(data_service: JsonFileDataService) -> Iterator[TestClient]:
    app.dependency_overrides[get_data_service] = lambda: data_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def write_store(data_file: Path):
    """Replace the file contents with the given records."""

    def _write(records: List[dict]) -> None:
        data_file.write_text(json.dumps(records), encoding="utf-8")

    return _write


@pytest.fixture
def read_store(data_file: Path):
    def _read() -> List[dict]:
        return json.loads(data_file.read_text(encoding="utf-8"))

    return _read
