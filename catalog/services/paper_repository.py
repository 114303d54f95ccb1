"""Paper Repository — CRUD primitives for papers.

Invariants:
    - Every returned Paper has authors loaded (ascending author id)
    - get() returns None for a missing id, including ids beyond the INTEGER
      range; require() raises ResourceNotFoundError
    - update() refreshes updated_at even when no scalar changes
    - Never commits and never touches paper_authors (RelationshipStore does)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.domain_types import (
    MAX_STORED_INTEGER, PaperId, PaperInput, ResourceType,
)
from catalog.core.errors import ResourceNotFoundError
from catalog.models.paper import Paper, utc_now


class PaperRepository:
    """Paper persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, paper_id: PaperId, *, for_update: bool = False) -> Paper | None:
        if paper_id > MAX_STORED_INTEGER:
            return None
        query = (
            select(Paper)
            .where(Paper.id == paper_id)
            .options(selectinload(Paper.authors))
            .execution_options(populate_existing=True)
        )
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def require(self, paper_id: PaperId, *, for_update: bool = False) -> Paper:
        paper = await self.get(paper_id, for_update=for_update)
        if paper is None:
            raise ResourceNotFoundError(ResourceType.PAPER, paper_id)
        return paper

    async def create(self, data: PaperInput) -> Paper:
        paper = Paper(
            title=data.title,
            published_in=data.published_in,
            year=data.year,
        )
        self.db.add(paper)
        await self.db.flush()
        return paper

    async def update(self, paper: Paper, data: PaperInput) -> Paper:
        paper.title = data.title
        paper.published_in = data.published_in
        paper.year = data.year
        paper.updated_at = utc_now()
        await self.db.flush()
        return paper

    async def delete(self, paper: Paper) -> None:
        await self.db.delete(paper)
        await self.db.flush()
