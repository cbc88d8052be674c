"""
==============================================================================
Settings Tests
==============================================================================

Tests for environment-driven configuration.

==============================================================================
"""

import pytest
from pydantic import ValidationError

from inventory.catalog import Catalog
from inventory.config import Settings, get_settings


class TestSettings:
    """Tests for the Settings model."""
    
    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        
        assert settings.reorder_level == 10
        assert settings.log_level == "WARNING"
        assert settings.debug is False
    
    def test_environment_override(self, monkeypatch):
        """Test INVENTORY_* variables are picked up."""
        monkeypatch.setenv("INVENTORY_REORDER_LEVEL", "3")
        monkeypatch.setenv("INVENTORY_LOG_LEVEL", "info")
        
        settings = Settings()
        
        assert settings.reorder_level == 3
        assert settings.log_level == "INFO"
    
    def test_unknown_log_level_falls_back(self):
        """Test an unknown level name does not fail startup."""
        assert Settings(log_level="chatty").log_level == "WARNING"
    
    def test_debug_forces_debug_level(self):
        """Test the debug flag wins over log_level."""
        assert Settings(debug=True, log_level="ERROR").effective_log_level == "DEBUG"
    
    def test_negative_reorder_level_rejected(self):
        """Test a negative reorder level fails validation."""
        with pytest.raises(ValidationError):
            Settings(reorder_level=-1)
    
    def test_get_settings_is_cached(self):
        """Test the singleton accessor returns one instance."""
        assert get_settings() is get_settings()


class TestCatalogSettings:
    """Tests for how the catalog picks up settings."""
    
    def test_catalog_uses_configured_reorder_level(self, monkeypatch):
        """Test a catalog without an explicit level reads settings."""
        monkeypatch.setenv("INVENTORY_REORDER_LEVEL", "3")
        get_settings.cache_clear()
        
        catalog = Catalog()
        result = catalog.add_or_update_product("1", "Apple", "Groceries", 5)
        
        assert catalog.reorder_level == 3
        assert result.alerts == []
    
    def test_explicit_reorder_level_wins(self, monkeypatch):
        """Test the constructor argument overrides settings."""
        monkeypatch.setenv("INVENTORY_REORDER_LEVEL", "3")
        get_settings.cache_clear()
        
        assert Catalog(reorder_level=0).reorder_level == 0
