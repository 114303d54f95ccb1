"""Author Service — transactional author use cases.

Invariants:
    - Body is validated before any read or write
    - update changes name/email/affiliation only; paper links are untouched
    - delete runs guard, link removal, and row removal in ONE transaction, with
      the author row locked, then every linked paper row locked in ascending id
      order; a refused delete leaves every row unchanged
    - Concurrent deletions of two co-authors of one paper serialize on that
      paper row, so the second guard sees the first removal
"""

import logging
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import AuthorId, AuthorQuery, Page
from catalog.core.validate_body import parse_author_input
from catalog.models.author import Author
from catalog.services.author_repository import AuthorRepository
from catalog.services.query_engine import QueryEngine
from catalog.services.relationship_store import RelationshipStore

logger = logging.getLogger(__name__)


class AuthorService:
    """Author reads and writes over one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.authors = AuthorRepository(db)
        self.links = RelationshipStore(db)
        self.queries = QueryEngine(db)

    async def list_authors(self, query: AuthorQuery) -> Page[Author]:
        return await self.queries.list_authors(query)

    async def get_author(self, author_id: AuthorId) -> Author | None:
        return await self.authors.get(author_id)

    async def create_author(self, body: Mapping[str, Any]) -> Author:
        data = parse_author_input(body)
        author = await self.authors.create(data)
        author_id = AuthorId(author.id)
        await self.db.commit()
        logger.info(f"Created author {author_id}", extra={"author_id": author_id})
        return await self.authors.require(author_id)

    async def update_author(self, author_id: AuthorId, body: Mapping[str, Any]) -> Author:
        data = parse_author_input(body)
        author = await self.authors.require(author_id, for_update=True)
        await self.authors.update(author, data)
        await self.db.commit()
        logger.info(f"Updated author {author_id}", extra={"author_id": author_id})
        return await self.authors.require(author_id)

    async def delete_author(self, author_id: AuthorId) -> None:
        author = await self.authors.require(author_id, for_update=True)
        try:
            paper_ids = await self.links.lock_author_papers(author_id)
            await self.links.guard_author_deletion(author_id)
        except Exception:
            await self.db.rollback()
            raise
        await self.links.drop_author_links(author_id)
        await self.authors.delete(author)
        await self.db.commit()
        logger.info(
            f"Deleted author {author_id}; unlinked from {len(paper_ids)} paper(s)",
            extra={"author_id": author_id},
        )
