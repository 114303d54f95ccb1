"""Author ORM — persists a paper author.

Invariants:
    - id is an autoincrement integer primary key, immutable once assigned
    - name is non-nullable; email and affiliation are nullable (None != "")
    - (name, email, affiliation) is the identity tuple but NOT unique:
      duplicates may exist and are resolved by lowest id
    - papers is a read path ordered by Paper.id ascending

Design Decisions:
    - No unique constraint on the identity tuple: authors created through
      POST /authors are never deduplicated, only paper writes reuse them
"""

from datetime import datetime

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.paper import utc_now


class Author(Base):
    """Author entity — may be linked to any number of papers."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    affiliation: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )

    # Relationships
    papers: Mapped[list["Paper"]] = relationship(
        "Paper", secondary="paper_authors",
        order_by="Paper.id", viewonly=True, lazy="raise",
    )
