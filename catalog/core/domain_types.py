"""Domain Types — identity types, value objects, and limits shared by core and shell.

Invariants:
    - PaperId and AuthorId wrap positive ints — assigned by the store, never by callers
    - AuthorIdentity is the (name, email, affiliation) triple; None is distinct from ""
    - Query value objects are already validated: limit in [1, MAX_LIMIT], offset >= 0

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for parsed inputs: the shell cannot mutate what the core validated
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, NewType, TypeVar


# ─── Identity Types ──────────────────────────────────────────────

PaperId = NewType("PaperId", int)
AuthorId = NewType("AuthorId", int)


# ─── Limits ──────────────────────────────────────────────────────

MIN_PUBLISHED_YEAR: int = 1900   # exclusive lower bound
MAX_STORED_INTEGER: int = 2_147_483_647   # INTEGER column range on PostgreSQL
DEFAULT_LIMIT: int = 10
MAX_LIMIT: int = 100
DEFAULT_OFFSET: int = 0


# ─── Enums ───────────────────────────────────────────────────────

class ResourceType(str, Enum):
    """Catalog entity kinds — value is the user-facing name in error messages."""
    PAPER = "Paper"
    AUTHOR = "Author"


# ─── Parsed Inputs ───────────────────────────────────────────────

@dataclass(frozen=True)
class AuthorIdentity:
    """Identity tuple used to deduplicate authors on paper writes."""
    name: str
    email: str | None = None
    affiliation: str | None = None


@dataclass(frozen=True)
class AuthorInput:
    """Normalized author body for create/update."""
    name: str
    email: str | None = None
    affiliation: str | None = None


@dataclass(frozen=True)
class PaperInput:
    """Normalized paper body for create/update."""
    title: str
    published_in: str
    year: int
    authors: tuple[AuthorIdentity, ...]


@dataclass(frozen=True)
class PaperQuery:
    """Validated paper list filters. `authors` terms are AND-ed."""
    year: int | None = None
    published_in: str | None = None
    authors: tuple[str, ...] = ()
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


@dataclass(frozen=True)
class AuthorQuery:
    """Validated author list filters."""
    name: str | None = None
    affiliation: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


# ─── Results ─────────────────────────────────────────────────────

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a filtered listing. `total` counts the whole filtered set."""
    items: list[T] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET
