"""Configuration helpers for the service runtime."""

from .settings import DEFAULT_JWT_SECRET, Settings, load_settings, normalize_prefix

__all__ = [
    "DEFAULT_JWT_SECRET",
    "Settings",
    "load_settings",
    "normalize_prefix",
]
