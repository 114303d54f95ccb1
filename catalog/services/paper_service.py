"""Paper Service — transactional paper use cases.

Invariants:
    - Body is validated before any read or write; a failing body never touches the DB
    - create/update are one transaction: resolve authors, write paper, replace links, commit
    - update replaces the author set (full replacement), never merges
    - delete removes the paper and its links; authors are never deleted
    - Results are re-read after commit so authors reflect the stored links
"""

import logging
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import Page, PaperId, PaperQuery
from catalog.core.validate_body import parse_paper_input
from catalog.models.paper import Paper
from catalog.services.author_resolver import AuthorResolver
from catalog.services.paper_repository import PaperRepository
from catalog.services.query_engine import QueryEngine
from catalog.services.relationship_store import RelationshipStore

logger = logging.getLogger(__name__)


class PaperService:
    """Paper reads and writes over one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.papers = PaperRepository(db)
        self.resolver = AuthorResolver(db)
        self.links = RelationshipStore(db)
        self.queries = QueryEngine(db)

    async def list_papers(self, query: PaperQuery) -> Page[Paper]:
        return await self.queries.list_papers(query)

    async def get_paper(self, paper_id: PaperId) -> Paper | None:
        return await self.papers.get(paper_id)

    async def create_paper(self, body: Mapping[str, Any]) -> Paper:
        data = parse_paper_input(body)
        author_ids = await self.resolver.resolve_all(data.authors)
        paper = await self.papers.create(data)
        paper_id = PaperId(paper.id)
        await self.links.set_paper_authors(paper_id, author_ids)
        await self.db.commit()
        logger.info(
            f"Created paper {paper_id} with {len(author_ids)} author(s)",
            extra={"paper_id": paper_id},
        )
        return await self.papers.require(paper_id)

    async def update_paper(self, paper_id: PaperId, body: Mapping[str, Any]) -> Paper:
        data = parse_paper_input(body)
        paper = await self.papers.require(paper_id, for_update=True)
        author_ids = await self.resolver.resolve_all(data.authors)
        await self.papers.update(paper, data)
        await self.links.set_paper_authors(paper_id, author_ids)
        await self.db.commit()
        logger.info(
            f"Updated paper {paper_id}; authors now {author_ids}",
            extra={"paper_id": paper_id},
        )
        return await self.papers.require(paper_id)

    async def delete_paper(self, paper_id: PaperId) -> None:
        paper = await self.papers.require(paper_id, for_update=True)
        await self.links.drop_paper_links(paper_id)
        await self.papers.delete(paper)
        await self.db.commit()
        logger.info(f"Deleted paper {paper_id}", extra={"paper_id": paper_id})
