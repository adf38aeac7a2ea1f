"""Configuration management for the graph store.

Loads settings from environment variables with sensible defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOOKUP_KEY_STYLES = ("camel", "exact")


@dataclass
class StoreConfig:
    """Graph store configuration."""
    lookup_key: str = "camel"  # "camel", "exact"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.lookup_key not in LOOKUP_KEY_STYLES:
            raise ValueError(f"lookup_key must be one of {LOOKUP_KEY_STYLES}, got {self.lookup_key!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "StoreConfig":
        return cls(
            lookup_key=os.getenv("JSONAPI_STORE_LOOKUP_KEY", "camel"),
            log_level=os.getenv("JSONAPI_STORE_LOG_LEVEL", "INFO"),
        )
