"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from crm_templates.shared.utils import generate_cuid, random_token

__all__ = ["generate_cuid", "random_token"]
