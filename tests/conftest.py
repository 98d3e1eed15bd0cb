"""
Pytest configuration for the TP REST API.

Provides fixtures for:
- A record store rooted in a per-test temporary directory
- Collection services over that store
- A FastAPI TestClient whose services point at the temporary store
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient

from tp_rest_api.collection_service import ORDERS, PRODUCTS, CollectionService, build_services
from tp_rest_api.record_store import RecordStore
from web.main import app
from web.services.collections import get_orders_service, get_products_service


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> RecordStore:
    return RecordStore(data_dir)


@pytest.fixture
def services(store: RecordStore) -> Dict[str, CollectionService]:
    return build_services(store)


@pytest.fixture
def client(services: Dict[str, CollectionService]) -> Generator[TestClient, None, None]:
    """
    TestClient wired to the temporary store.

    Startup hooks are not run, so the real data directory is never touched.
    """
    app.dependency_overrides[get_products_service] = lambda: services[PRODUCTS]
    app.dependency_overrides[get_orders_service] = lambda: services[ORDERS]
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
