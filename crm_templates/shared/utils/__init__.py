"""Shared utilities: generators."""

from crm_templates.shared.utils.generators import generate_cuid, random_token

__all__ = ["generate_cuid", "random_token"]
