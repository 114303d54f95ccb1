"""Relationship Store — owns the paper_authors association.

Invariants:
    - set_paper_authors REPLACES the paper's links (delete all, insert new), never merges
    - A paper's link set after set_paper_authors equals exactly the given ids
    - guard_author_deletion raises SoleAuthorError and changes nothing when the
      author is the only linked author of any paper
    - Never commits: the caller's transaction groups the guard with the delete
    - lock_author_papers locks paper rows in ascending id order, so concurrent
      co-author deletions on one paper run one after the other

Design Decisions:
    - Sole-author detection is a GROUP BY / HAVING count(*) = 1 over the
      author's papers, not a flag on either entity
    - Writes go through the Core table, so the viewonly ORM collections stay
      read-only and are reloaded by the repositories after commit
"""

import logging

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import AuthorId, PaperId
from catalog.core.errors import SoleAuthorError
from catalog.models.paper import Paper
from catalog.models.paper_author import paper_authors

logger = logging.getLogger(__name__)


class RelationshipStore:
    """Reads and writes paper <-> author links by id."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def set_paper_authors(
        self, paper_id: PaperId, author_ids: list[AuthorId],
    ) -> None:
        """Replace every author link of the paper with author_ids."""
        await self.drop_paper_links(paper_id)
        unique_ids = list(dict.fromkeys(author_ids))
        if unique_ids:
            await self.db.execute(
                insert(paper_authors),
                [
                    {"paper_id": paper_id, "author_id": author_id}
                    for author_id in unique_ids
                ],
            )

    async def lock_author_papers(self, author_id: AuthorId) -> list[PaperId]:
        """Lock every paper linked to the author (SELECT ... FOR UPDATE), ascending.

        Two deletions of co-authors of the same paper both lock that paper row,
        so the second waits and its guard sees the first one's removed link.
        """
        authored = (
            select(paper_authors.c.paper_id)
            .where(paper_authors.c.author_id == author_id)
        )
        result = await self.db.execute(
            select(Paper.id)
            .where(Paper.id.in_(authored))
            .order_by(Paper.id.asc())
            .with_for_update()
        )
        return [PaperId(row) for row in result.scalars().all()]

    async def find_sole_authored_papers(self, author_id: AuthorId) -> list[PaperId]:
        """Papers whose author set is exactly {author_id}, ascending."""
        authored = (
            select(paper_authors.c.paper_id)
            .where(paper_authors.c.author_id == author_id)
        )
        result = await self.db.execute(
            select(paper_authors.c.paper_id)
            .where(paper_authors.c.paper_id.in_(authored))
            .group_by(paper_authors.c.paper_id)
            .having(func.count(paper_authors.c.author_id) == 1)
            .order_by(paper_authors.c.paper_id.asc())
        )
        return [PaperId(row) for row in result.scalars().all()]

    async def guard_author_deletion(self, author_id: AuthorId) -> None:
        """Raise SoleAuthorError if deleting the author would orphan a paper."""
        sole_papers = await self.find_sole_authored_papers(author_id)
        if sole_papers:
            logger.warning(
                f"Refused to delete author {author_id}: sole author of "
                f"{len(sole_papers)} paper(s)",
                extra={"author_id": author_id, "error_code": "SOLE_AUTHOR_CONSTRAINT"},
            )
            raise SoleAuthorError(author_id, sole_papers)

    async def drop_paper_links(self, paper_id: PaperId) -> None:
        await self.db.execute(
            delete(paper_authors).where(paper_authors.c.paper_id == paper_id),
        )

    async def drop_author_links(self, author_id: AuthorId) -> None:
        await self.db.execute(
            delete(paper_authors).where(paper_authors.c.author_id == author_id),
        )
