"""Author Repository — CRUD primitives for authors.

Invariants:
    - Every returned Author has papers loaded (ascending paper id)
    - get() returns None for a missing id, including ids beyond the INTEGER
      range; require() raises ResourceNotFoundError
    - update() changes scalar fields only; links are never touched here
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.domain_types import (
    MAX_STORED_INTEGER, AuthorId, AuthorInput, ResourceType,
)
from catalog.core.errors import ResourceNotFoundError
from catalog.models.author import Author
from catalog.models.paper import utc_now


class AuthorRepository:
    """Author persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, author_id: AuthorId, *, for_update: bool = False) -> Author | None:
        if author_id > MAX_STORED_INTEGER:
            return None
        query = (
            select(Author)
            .where(Author.id == author_id)
            .options(selectinload(Author.papers))
            .execution_options(populate_existing=True)
        )
        if for_update:
            # Serializes a concurrent paper write that links this author
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def require(self, author_id: AuthorId, *, for_update: bool = False) -> Author:
        author = await self.get(author_id, for_update=for_update)
        if author is None:
            raise ResourceNotFoundError(ResourceType.AUTHOR, author_id)
        return author

    async def create(self, data: AuthorInput) -> Author:
        author = Author(
            name=data.name,
            email=data.email,
            affiliation=data.affiliation,
        )
        self.db.add(author)
        await self.db.flush()
        return author

    async def update(self, author: Author, data: AuthorInput) -> Author:
        author.name = data.name
        author.email = data.email
        author.affiliation = data.affiliation
        author.updated_at = utc_now()
        await self.db.flush()
        return author

    async def delete(self, author: Author) -> None:
        await self.db.delete(author)
        await self.db.flush()
