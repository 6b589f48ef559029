"""Tenant-unique slug arbitration.

ensure_unique_slug is read-then-decide and not atomic: two concurrent
callers with the same candidate can both get the same answer. The
(tenant_id, slug) unique constraint is the real guarantee; callers insert
and retry on SlugConflictException (see CreateTemplateUseCase).
"""

from __future__ import annotations

import logging
import re
import time
import unicodedata
from collections.abc import Callable
from typing import TYPE_CHECKING

from crm_templates.core.constants import SLUG_TOKEN_LENGTH
from crm_templates.shared.utils.generators import random_token

if TYPE_CHECKING:
    from crm_templates.application.interfaces.repositories import ITemplateRepository

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase ASCII slug: accents stripped, non-alphanumeric runs become '-'.

    E.g. 'Offre Été 2024 !' -> 'offre-ete-2024'.
    """
    ascii_text = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_ALNUM_RE.sub("-", ascii_text.lower()).strip("-")


def current_time_millis() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class SlugArbiter:
    """Resolves a candidate slug to one not yet used in the tenant."""

    def __init__(
        self,
        template_repo: "ITemplateRepository",
        *,
        clock: Callable[[], int] = current_time_millis,
        token_factory: Callable[[], str] = lambda: random_token(SLUG_TOKEN_LENGTH),
    ) -> None:
        self._repo = template_repo
        self._clock = clock
        self._token_factory = token_factory

    def fresh_token(self) -> str:
        """Return a new short random token (used for suffixes on retry)."""
        return self._token_factory()

    async def ensure_unique_slug(self, candidate: str, tenant_id: str) -> str:
        """Return candidate if free in the tenant, else a suffixed variant.

        1. candidate, when no template of the tenant uses it;
        2. else candidate-<millis>, when that one is free;
        3. else candidate-<millis>-<token>, returned without a further check.

        The result is a hint, not a reservation.
        """
        if await self._repo.find_by_slug(tenant_id, candidate) is None:
            return candidate
        timestamped = f"{candidate}-{self._clock()}"
        logger.info(
            "Slug %r taken in tenant %s; trying %r", candidate, tenant_id, timestamped
        )
        if await self._repo.find_by_slug(tenant_id, timestamped) is None:
            return timestamped
        return f"{timestamped}-{self._token_factory()}"
