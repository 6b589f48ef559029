"""Telemetry: logging setup."""

from crm_templates.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
