"""paper_authors — association table for the many-to-many Paper <-> Author relation.

Invariants:
    - Composite primary key (paper_id, author_id): a pair is linked at most once
    - Both foreign keys cascade on delete at the database level
    - Only RelationshipStore writes rows here; ORM relationships over it are viewonly

Design Decisions:
    - Core Table over an association object: the link carries no attributes of its own
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from catalog.db.base import Base


paper_authors = Table(
    "paper_authors",
    Base.metadata,
    Column(
        "paper_id", Integer,
        ForeignKey("papers.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "author_id", Integer,
        ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
        index=True,
    ),
)
