"""
==============================================================================
Inventory Settings Module
==============================================================================

Configuration for the inventory catalog using Pydantic Settings.

Configuration Priority (highest to lowest):
------------------------------------------
1. Explicit constructor arguments
2. Environment variables (prefixed with INVENTORY_)
3. .env file
4. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Inventory settings loaded from environment variables.
    
    Attributes:
        reorder_level: Stock threshold below which a low-stock alert is raised
        log_level: Logging level name for the entry point
        debug: Force DEBUG logging regardless of log_level
    
    Example:
        >>> settings = Settings(reorder_level=5)
        >>> settings.reorder_level
        5
        >>> settings.effective_log_level
        'WARNING'
    """
    
    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )
    
    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    reorder_level: int = Field(
        default=10,
        ge=0,
        description="Stock threshold below which a low-stock alert is raised"
    )
    
    # =========================================================================
    # LOGGING SETTINGS
    # =========================================================================
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    
    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )
    
    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Normalize the log level name.
        
        Unknown names fall back to WARNING instead of failing startup.
        """
        normalized = value.upper().strip()
        
        if normalized not in VALID_LOG_LEVELS:
            logger.warning(
                f"Unknown log level '{value}', defaulting to 'WARNING'"
            )
            return "WARNING"
        
        return normalized
    
    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def effective_log_level(self) -> str:
        """Log level actually applied, honoring the debug flag."""
        return "DEBUG" if self.debug else self.log_level
    
    def __repr__(self) -> str:
        return (
            f"Settings(reorder_level={self.reorder_level}, "
            f"log_level={self.log_level!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).
    
    Call ``get_settings.cache_clear()`` to pick up changed environment
    variables.
    
    Returns:
        Global Settings instance
    """
    settings = Settings()
    
    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")
    
    return settings
