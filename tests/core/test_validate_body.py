"""Body Validation — pure tests for paper and author body rules.

Tests cover:
    - Message order and collection (no short-circuit across fields)
    - null vs missing vs blank for title, publishedIn, name
    - year: required vs invalid (mutually exclusive), boundary 1900/1901
    - authors: missing, null, non-list, empty; "Author name is required" once
    - parse_* normalization: year coerced to int, absent email/affiliation -> None
"""

import pytest

from catalog.core.domain_types import AuthorIdentity
from catalog.core.errors import BodyValidationError
from catalog.core.validate_body import (
    AUTHOR_NAME_REQUIRED,
    AUTHORS_REQUIRED,
    NAME_REQUIRED,
    TITLE_REQUIRED,
    VENUE_REQUIRED,
    YEAR_INVALID,
    YEAR_REQUIRED,
    parse_author_input,
    parse_paper_input,
    validate_author_input,
    validate_paper_input,
)


def _paper(**overrides):
    body = {
        "title": "Sample Paper Title",
        "publishedIn": "ICSE 2024",
        "year": 2024,
        "authors": [
            {"name": "John Doe", "email": "john@mail.utoronto.ca",
             "affiliation": "University of Toronto"},
        ],
    }
    body.update(overrides)
    return body


# --- validate_paper_input -----------------------------------------------------

def test_valid_paper_has_no_errors():
    assert validate_paper_input(_paper()) == []


def test_empty_body_reports_every_field_in_order():
    assert validate_paper_input({}) == [
        "Title is required",
        "Published venue is required",
        "Published year is required",
        "At least one author is required",
    ]


def test_null_fields_fail_like_missing_ones():
    body = {"title": None, "publishedIn": None, "year": None, "authors": None}
    assert validate_paper_input(body) == [
        TITLE_REQUIRED, VENUE_REQUIRED, YEAR_REQUIRED, AUTHORS_REQUIRED,
    ]


@pytest.mark.parametrize("title", ["", "   ", "\t\n", 42, ["x"]])
def test_blank_or_non_string_title_is_required(title):
    assert validate_paper_input(_paper(title=title)) == [TITLE_REQUIRED]


def test_whitespace_only_venue_is_rejected_in_body():
    assert validate_paper_input(_paper(publishedIn="  ")) == [VENUE_REQUIRED]


def test_year_1900_is_invalid():
    assert validate_paper_input(_paper(year=1900)) == [YEAR_INVALID]
    assert YEAR_INVALID == "Valid year after 1900 is required"


def test_year_1901_is_valid():
    assert validate_paper_input(_paper(year=1901)) == []


def test_year_must_fit_stored_integer():
    assert validate_paper_input(_paper(year=2_147_483_647)) == []
    assert validate_paper_input(_paper(year=2_147_483_648)) == [YEAR_INVALID]


@pytest.mark.parametrize("year", ["2024", 2024.5, True, [2024], {"y": 2024}])
def test_non_integer_year_is_invalid_not_missing(year):
    assert validate_paper_input(_paper(year=year)) == [YEAR_INVALID]


def test_integral_float_year_is_accepted():
    assert validate_paper_input(_paper(year=2024.0)) == []


@pytest.mark.parametrize("authors", [None, [], "John Doe", {"name": "John"}])
def test_missing_or_non_list_authors(authors):
    assert validate_paper_input(_paper(authors=authors)) == [AUTHORS_REQUIRED]


def test_author_name_required_reported_once():
    body = _paper(authors=[{"name": ""}, {"email": "x@y.z"}, {"name": " "}])
    assert validate_paper_input(body) == [AUTHOR_NAME_REQUIRED]


def test_author_name_check_stops_at_first_failure_after_valid_authors():
    body = _paper(authors=[{"name": "Ok"}, {"name": None}, {"name": "Also ok"}])
    assert validate_paper_input(body) == [AUTHOR_NAME_REQUIRED]


def test_non_object_author_counts_as_missing_name():
    assert validate_paper_input(_paper(authors=["John Doe"])) == [AUTHOR_NAME_REQUIRED]


def test_author_email_and_affiliation_are_not_validated():
    body = _paper(authors=[{"name": "A", "email": 123, "affiliation": ""}])
    assert validate_paper_input(body) == []


def test_errors_collected_across_fields():
    body = _paper(title=" ", year=1800, authors=[{"name": ""}])
    assert validate_paper_input(body) == [
        TITLE_REQUIRED, YEAR_INVALID, AUTHOR_NAME_REQUIRED,
    ]


# --- validate_author_input ----------------------------------------------------

@pytest.mark.parametrize("name", [None, "", "   ", 123, ["A"]])
def test_author_name_must_be_non_blank_string(name):
    assert validate_author_input({"name": name}) == [NAME_REQUIRED]


def test_author_missing_name():
    assert validate_author_input({"email": "a@b.c"}) == ["Name is required"]


def test_author_only_name_is_valid():
    assert validate_author_input({"name": "Jane"}) == []


# --- parse_* ------------------------------------------------------------------

def test_parse_paper_input_normalizes():
    data = parse_paper_input(_paper(
        year=2023.0,
        authors=[{"name": "Jane Smith", "email": None, "affiliation": "U A"},
                 {"name": "Solo"}],
    ))
    assert data.year == 2023
    assert isinstance(data.year, int)
    assert data.published_in == "ICSE 2024"
    assert data.authors == (
        AuthorIdentity("Jane Smith", None, "U A"),
        AuthorIdentity("Solo", None, None),
    )


def test_parse_paper_input_keeps_empty_string_email_distinct_from_none():
    data = parse_paper_input(_paper(authors=[{"name": "A", "email": ""}]))
    assert data.authors[0].email == ""
    assert data.authors[0] != AuthorIdentity("A", None, None)


def test_parse_paper_input_raises_with_all_messages():
    with pytest.raises(BodyValidationError) as exc_info:
        parse_paper_input({})
    assert exc_info.value.messages == [
        TITLE_REQUIRED, VENUE_REQUIRED, YEAR_REQUIRED, AUTHORS_REQUIRED,
    ]
    assert exc_info.value.http_status == 400


def test_parse_author_input_defaults_optional_fields_to_none():
    data = parse_author_input({"name": "Jane"})
    assert data.email is None
    assert data.affiliation is None


def test_parse_author_input_raises():
    with pytest.raises(BodyValidationError) as exc_info:
        parse_author_input({"name": "  "})
    assert exc_info.value.to_response() == {
        "error": "Validation Error", "messages": ["Name is required"],
    }
