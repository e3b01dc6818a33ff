"""Telemetry: logging setup."""

from catalog.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
