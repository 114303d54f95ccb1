"""Body Validation — checks paper and author request bodies and normalizes them.

Invariants:
    - validate_* functions are PURE: return the ordered list of messages, empty on success
    - Paper checks collect every violation; only the per-author name check stops early
    - "Author name is required" appears at most once per body
    - year must fit the stored INTEGER column; larger values are "Valid year" failures
    - Email and affiliation are never validated (absent -> None)
    - parse_* raise BodyValidationError instead of returning a partial value

Design Decisions:
    - Plain functions over Pydantic models: messages, their order, and the
      null-vs-missing rules are part of the public contract and must match exactly
"""

from typing import Any, Mapping

from catalog.core.domain_types import (
    MAX_STORED_INTEGER, MIN_PUBLISHED_YEAR,
    AuthorIdentity, AuthorInput, PaperInput,
)
from catalog.core.errors import BodyValidationError


TITLE_REQUIRED = "Title is required"
VENUE_REQUIRED = "Published venue is required"
YEAR_REQUIRED = "Published year is required"
YEAR_INVALID = f"Valid year after {MIN_PUBLISHED_YEAR} is required"
AUTHORS_REQUIRED = "At least one author is required"
AUTHOR_NAME_REQUIRED = "Author name is required"
NAME_REQUIRED = "Name is required"


def is_non_blank(value: Any) -> bool:
    """True for a str with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def as_integer(value: Any) -> int | None:
    """Return value as int if it is an integral number (bools excluded), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_paper_input(body: Mapping[str, Any]) -> list[str]:
    """Collect paper body violations in contract order."""
    errors: list[str] = []

    if not is_non_blank(body.get("title")):
        errors.append(TITLE_REQUIRED)

    if not is_non_blank(body.get("publishedIn")):
        errors.append(VENUE_REQUIRED)

    year = body.get("year")
    if year is None:
        errors.append(YEAR_REQUIRED)
    else:
        parsed = as_integer(year)
        if parsed is None or not MIN_PUBLISHED_YEAR < parsed <= MAX_STORED_INTEGER:
            errors.append(YEAR_INVALID)

    authors = body.get("authors")
    if not isinstance(authors, list) or not authors:
        errors.append(AUTHORS_REQUIRED)
    else:
        for author in authors:
            if not isinstance(author, Mapping) or not is_non_blank(author.get("name")):
                errors.append(AUTHOR_NAME_REQUIRED)
                break

    return errors


def validate_author_input(body: Mapping[str, Any]) -> list[str]:
    """Collect author body violations."""
    if not is_non_blank(body.get("name")):
        return [NAME_REQUIRED]
    return []


def parse_paper_input(body: Mapping[str, Any]) -> PaperInput:
    """Validate and normalize a paper body. Raises BodyValidationError."""
    errors = validate_paper_input(body)
    if errors:
        raise BodyValidationError(errors)
    return PaperInput(
        title=body["title"],
        published_in=body["publishedIn"],
        year=as_integer(body["year"]),
        authors=tuple(
            AuthorIdentity(
                name=author["name"],
                email=author.get("email"),
                affiliation=author.get("affiliation"),
            )
            for author in body["authors"]
        ),
    )


def parse_author_input(body: Mapping[str, Any]) -> AuthorInput:
    """Validate and normalize an author body. Raises BodyValidationError."""
    errors = validate_author_input(body)
    if errors:
        raise BodyValidationError(errors)
    return AuthorInput(
        name=body["name"],
        email=body.get("email"),
        affiliation=body.get("affiliation"),
    )
