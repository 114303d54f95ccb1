"""Query & Path Validation — pure tests for list parameters and resource ids.

Tests cover:
    - Defaults (limit=10, offset=0) and bounds (limit 1..100, offset >= 0)
    - year > 1900, integer-only parsing (no fractions, suffixes, whitespace)
    - publishedIn: whitespace-only kept as a literal, empty rejected
    - author: single term, repeated terms, blank term rejected
    - name/affiliation must be non-blank
    - Resource ids: 0, -1, 3.14, 1aaa rejected with "Invalid ID format"
"""

import pytest

from catalog.core.domain_types import AuthorQuery, PaperQuery
from catalog.core.errors import ParameterValidationError
from catalog.core.validate_query import (
    parse_author_query,
    parse_integer,
    parse_paper_query,
    parse_resource_id,
)


# --- parse_integer ------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("1", 1), ("0", 0), ("-3", -3), ("+7", 7), ("0010", 10),
])
def test_parse_integer_accepts_plain_integers(raw, expected):
    assert parse_integer(raw) == expected


@pytest.mark.parametrize("raw", [
    "", " 1", "1 ", "3.14", "1.0", "1aaa", "abc", "1e3", "0x10", None, ["1"],
])
def test_parse_integer_rejects_everything_else(raw):
    assert parse_integer(raw) is None


# --- parse_resource_id --------------------------------------------------------

def test_resource_id_accepts_positive_integer():
    assert parse_resource_id("1") == 1
    assert parse_resource_id("999") == 999


@pytest.mark.parametrize("raw", ["0", "-1", "3.14", "1aaa", "abc", ""])
def test_resource_id_rejects_invalid_formats(raw):
    with pytest.raises(ParameterValidationError) as exc_info:
        parse_resource_id(raw)
    assert exc_info.value.to_response() == {
        "error": "Validation Error", "message": "Invalid ID format",
    }


# --- parse_paper_query --------------------------------------------------------

def test_paper_query_defaults():
    assert parse_paper_query({}) == PaperQuery(limit=10, offset=0)


def test_paper_query_parses_all_parameters():
    query = parse_paper_query({
        "year": "2024", "publishedIn": "ICSE", "author": "doe",
        "limit": "5", "offset": "2",
    })
    assert query == PaperQuery(
        year=2024, published_in="ICSE", authors=("doe",), limit=5, offset=2,
    )


def test_repeated_author_terms_are_kept_in_order():
    query = parse_paper_query({"author": ["john doe", "charlie"]})
    assert query.authors == ("john doe", "charlie")


def test_whitespace_only_published_in_is_a_literal_filter():
    assert parse_paper_query({"publishedIn": " "}).published_in == " "


@pytest.mark.parametrize("params", [
    {"year": "1900"},
    {"year": "2147483648"},
    {"year": "abc"},
    {"year": "2023.5"},
    {"year": ">2020"},
    {"year": ["2020", "2021"]},
    {"publishedIn": ""},
    {"publishedIn": ["ICSE", "FSE"]},
    {"author": ""},
    {"author": "   "},
    {"author": ["john", " "]},
    {"limit": "0"},
    {"limit": "101"},
    {"limit": "abc"},
    {"limit": "2.5"},
    {"offset": "-1"},
    {"offset": "x"},
])
def test_paper_query_rejects_invalid_parameters(params):
    with pytest.raises(ParameterValidationError) as exc_info:
        parse_paper_query(params)
    assert exc_info.value.message == "Invalid query parameter format"


def test_paper_query_year_boundary():
    assert parse_paper_query({"year": "1901"}).year == 1901


def test_paper_query_limit_bounds_inclusive():
    assert parse_paper_query({"limit": "1"}).limit == 1
    assert parse_paper_query({"limit": "100"}).limit == 100
    assert parse_paper_query({"offset": "0"}).offset == 0


def test_paper_query_ignores_unknown_parameters():
    assert parse_paper_query({"sort": "desc"}) == PaperQuery()


# --- parse_author_query -------------------------------------------------------

def test_author_query_defaults():
    assert parse_author_query({}) == AuthorQuery(limit=10, offset=0)


def test_author_query_parses_filters():
    query = parse_author_query({
        "name": "john", "affiliation": "Toronto", "limit": "3", "offset": "1",
    })
    assert query == AuthorQuery(
        name="john", affiliation="Toronto", limit=3, offset=1,
    )


@pytest.mark.parametrize("params", [
    {"name": ""},
    {"name": "  "},
    {"affiliation": ""},
    {"affiliation": " "},
    {"limit": "101"},
    {"offset": "-5"},
])
def test_author_query_rejects_invalid_parameters(params):
    with pytest.raises(ParameterValidationError):
        parse_author_query(params)
