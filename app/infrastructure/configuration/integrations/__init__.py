"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.maxmind import MaxMindSettings

__all__ = [
    "MaxMindSettings",
]
