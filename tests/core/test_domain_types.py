"""Domain Types — verifies identity types, value objects, and limits.

Tests:
    - NewType wrappers are transparent ints
    - ResourceType values are the user-facing entity names
    - Parsed inputs are frozen; None and "" identities differ
    - Page defaults match the listing defaults
"""

import dataclasses

import pytest

from catalog.core.domain_types import (
    DEFAULT_LIMIT, DEFAULT_OFFSET, MAX_LIMIT, MIN_PUBLISHED_YEAR,
    AuthorId, AuthorIdentity, Page, PaperId, PaperQuery, ResourceType,
)


def test_identity_types_wrap_int():
    assert PaperId(3) == 3
    assert AuthorId(7) == 7


def test_limits():
    assert (MIN_PUBLISHED_YEAR, DEFAULT_LIMIT, MAX_LIMIT, DEFAULT_OFFSET) == (
        1900, 10, 100, 0,
    )


def test_resource_type_values():
    assert ResourceType.PAPER.value == "Paper"
    assert ResourceType.AUTHOR.value == "Author"
    assert len(ResourceType) == 2


def test_author_identity_is_frozen_and_hashable():
    identity = AuthorIdentity("Jane", None, "U")
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.name = "Other"  # type: ignore[misc]
    assert len({identity, AuthorIdentity("Jane", None, "U")}) == 1


def test_none_and_empty_email_are_distinct_identities():
    assert AuthorIdentity("Jane", None) != AuthorIdentity("Jane", "")


def test_query_and_page_defaults():
    assert PaperQuery().authors == ()
    page = Page()
    assert (page.items, page.total, page.limit, page.offset) == ([], 0, 10, 0)
