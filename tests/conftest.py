"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog and settings fixtures.

==============================================================================
"""

import pytest

from inventory.catalog import Catalog
from inventory.config import get_settings


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from INVENTORY_* variables and the settings cache."""
    for name in ("INVENTORY_REORDER_LEVEL", "INVENTORY_LOG_LEVEL", "INVENTORY_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> Catalog:
    """Create an empty catalog with the default reorder level."""
    return Catalog(reorder_level=10)


@pytest.fixture
def seeded_catalog(catalog: Catalog) -> Catalog:
    """Catalog holding one product in each of three categories."""
    catalog.add_or_update_product("1", "Laptop", "Electronics", 50)
    catalog.add_or_update_product("2", "Chair", "Furniture", 20)
    catalog.add_or_update_product("3", "Apple", "Groceries", 5)
    return catalog
