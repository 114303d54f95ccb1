"""Query & Path Validation — parses list filters, pagination, and resource ids.

Invariants:
    - Pure: input is a plain mapping of raw strings (a repeated key arrives as a list)
    - Short-circuits on the first failure with a single generic message
    - Integers must match [+-]?digits exactly: no whitespace, fraction, or suffix
    - limit defaults to DEFAULT_LIMIT and stays within [1, MAX_LIMIT]; offset defaults to 0
    - publishedIn keeps whitespace-only values as literal filters; name, affiliation,
      and author terms must be non-blank

Design Decisions:
    - Check order mirrors the parameter order of the public API docs so the same
      request always fails on the same parameter
"""

import re
from typing import Mapping, NoReturn

from catalog.core.domain_types import (
    DEFAULT_LIMIT, DEFAULT_OFFSET, MAX_LIMIT, MAX_STORED_INTEGER,
    MIN_PUBLISHED_YEAR,
    AuthorQuery, PaperQuery,
)
from catalog.core.errors import (
    INVALID_ID_MESSAGE, INVALID_QUERY_MESSAGE, ParameterValidationError,
)
from catalog.core.validate_body import is_non_blank

RawParams = Mapping[str, str | list[str]]

_INTEGER = re.compile(r"[+-]?\d+")


def parse_integer(raw: object) -> int | None:
    """Parse a raw query/path value as an int, or None if it is not one."""
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw):
        return None
    return int(raw)


def parse_resource_id(raw: object) -> int:
    """Parse a path id. Zero, negatives, decimals, and suffixes are rejected."""
    parsed = parse_integer(raw)
    if parsed is None or parsed <= 0:
        raise ParameterValidationError(INVALID_ID_MESSAGE)
    return parsed


def parse_paper_query(params: RawParams) -> PaperQuery:
    """Validate paper list parameters. Raises ParameterValidationError."""
    year = None
    if "year" in params:
        year = parse_integer(params["year"])
        if year is None or not MIN_PUBLISHED_YEAR < year <= MAX_STORED_INTEGER:
            _reject()

    published_in = params.get("publishedIn")
    if published_in is not None:
        if not isinstance(published_in, str) or not published_in:
            _reject()

    authors: tuple[str, ...] = ()
    if "author" in params:
        raw_author = params["author"]
        terms = raw_author if isinstance(raw_author, list) else [raw_author]
        if not all(is_non_blank(term) for term in terms):
            _reject()
        authors = tuple(terms)

    return PaperQuery(
        year=year,
        published_in=published_in,
        authors=authors,
        limit=_parse_limit(params),
        offset=_parse_offset(params),
    )


def parse_author_query(params: RawParams) -> AuthorQuery:
    """Validate author list parameters. Raises ParameterValidationError."""
    name = params.get("name")
    if name is not None and not is_non_blank(name):
        _reject()

    affiliation = params.get("affiliation")
    if affiliation is not None and not is_non_blank(affiliation):
        _reject()

    return AuthorQuery(
        name=name,
        affiliation=affiliation,
        limit=_parse_limit(params),
        offset=_parse_offset(params),
    )


def _parse_limit(params: RawParams) -> int:
    if "limit" not in params:
        return DEFAULT_LIMIT
    limit = parse_integer(params["limit"])
    if limit is None or not 1 <= limit <= MAX_LIMIT:
        _reject()
    return limit


def _parse_offset(params: RawParams) -> int:
    if "offset" not in params:
        return DEFAULT_OFFSET
    offset = parse_integer(params["offset"])
    if offset is None or offset < 0:
        _reject()
    return offset


def _reject() -> NoReturn:
    raise ParameterValidationError(INVALID_QUERY_MESSAGE)
