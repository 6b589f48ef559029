"""Tests for slugify and SlugArbiter.ensure_unique_slug (mocked template repo)."""

import re

import pytest

from crm_templates.application.dtos.template import TemplateResult
from crm_templates.application.services.slug_arbiter import SlugArbiter, slugify
from crm_templates.shared.utils.generators import random_token

_MILLIS = 1_736_000_000_000


@pytest.fixture
def arbiter_with_mocks():
    """SlugArbiter over a mock repo holding (tenant_id, slug) pairs."""

    class MockTemplateRepo:
        def __init__(self, taken: set[tuple[str, str]]):
            self.taken = taken
            self.lookups: list[tuple[str, str]] = []

        async def find_by_slug(self, tenant_id: str, slug: str) -> TemplateResult | None:
            self.lookups.append((tenant_id, slug))
            if (tenant_id, slug) not in self.taken:
                return None
            return TemplateResult(
                id="tpl1",
                tenant_id=tenant_id,
                title="Existing",
                slug=slug,
                content="",
                category="GENERIC",
            )

    def make(
        taken: set[tuple[str, str]] | None = None, **kwargs
    ) -> tuple[SlugArbiter, MockTemplateRepo]:
        repo = MockTemplateRepo(taken or set())
        return SlugArbiter(repo, **kwargs), repo

    return make


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Offre Standard", "offre-standard"),
        ("Offre Été 2024 !", "offre-ete-2024"),
        ("  --CDI__Cadre--  ", "cdi-cadre"),
        ("", ""),
        ("!!!", ""),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected


async def test_free_candidate_is_returned_as_is(arbiter_with_mocks) -> None:
    arbiter, repo = arbiter_with_mocks()
    assert await arbiter.ensure_unique_slug("offre-standard", "t1") == "offre-standard"
    assert repo.lookups == [("t1", "offre-standard")]


async def test_collision_appends_timestamp(arbiter_with_mocks) -> None:
    arbiter, _ = arbiter_with_mocks({("t1", "offre-standard")})
    slug = await arbiter.ensure_unique_slug("offre-standard", "t1")
    assert re.fullmatch(r"offre-standard-\d+", slug)


async def test_collision_uses_injected_clock(arbiter_with_mocks) -> None:
    arbiter, _ = arbiter_with_mocks(
        {("t1", "offre-standard")}, clock=lambda: _MILLIS
    )
    assert (
        await arbiter.ensure_unique_slug("offre-standard", "t1")
        == f"offre-standard-{_MILLIS}"
    )


async def test_double_collision_appends_token_without_further_check(
    arbiter_with_mocks,
) -> None:
    arbiter, repo = arbiter_with_mocks(
        {("t1", "offre-standard"), ("t1", f"offre-standard-{_MILLIS}")},
        clock=lambda: _MILLIS,
        token_factory=lambda: "k3x9qa",
    )
    slug = await arbiter.ensure_unique_slug("offre-standard", "t1")
    assert slug == f"offre-standard-{_MILLIS}-k3x9qa"
    assert len(repo.lookups) == 2


async def test_default_token_is_six_base36_chars(arbiter_with_mocks) -> None:
    arbiter, _ = arbiter_with_mocks(
        {("t1", "a"), ("t1", f"a-{_MILLIS}")}, clock=lambda: _MILLIS
    )
    slug = await arbiter.ensure_unique_slug("a", "t1")
    assert re.fullmatch(rf"a-{_MILLIS}-[a-z0-9]{{6}}", slug)


async def test_slug_taken_in_other_tenant_is_free(arbiter_with_mocks) -> None:
    arbiter, _ = arbiter_with_mocks({("t1", "offre-standard")})
    assert await arbiter.ensure_unique_slug("offre-standard", "t2") == "offre-standard"


def test_random_token() -> None:
    assert re.fullmatch(r"[a-z0-9]{6}", random_token(6))
    with pytest.raises(ValueError):
        random_token(0)
