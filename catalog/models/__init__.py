"""ORM Models — SQLAlchemy declarative models for papers, authors, and their links.

Invariants:
    - All models inherit from Base (db/base.py)
    - Paper and Author are independent tables keyed by integer ids;
      paper_authors is the only place the relation is stored

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (standard SQLAlchemy pattern)
"""

from catalog.models.paper_author import paper_authors  # noqa: F401
from catalog.models.paper import Paper  # noqa: F401
from catalog.models.author import Author  # noqa: F401
