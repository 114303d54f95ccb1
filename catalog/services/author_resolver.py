"""Author Resolver — maps an identity tuple to an existing or new author id.

Invariants:
    - Match is exact on all three fields; a None field matches only NULL, never ""
    - Among duplicate matches the lowest id wins (explicit ORDER BY id)
    - A miss creates the author with the exact tuple and flushes to obtain its id
    - Runs inside the caller's transaction: never commits

Design Decisions:
    - Flush per created author: later identities in the same request see it,
      so a tuple repeated within one paper resolves to a single author
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import AuthorId, AuthorIdentity
from catalog.models.author import Author

logger = logging.getLogger(__name__)


def _matches(column, value):
    return column.is_(None) if value is None else column == value


class AuthorResolver:
    """Finds or creates authors by identity tuple."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, identity: AuthorIdentity) -> Author | None:
        """Lowest-id author matching the identity tuple, or None."""
        result = await self.db.execute(
            select(Author)
            .where(Author.name == identity.name)
            .where(_matches(Author.email, identity.email))
            .where(_matches(Author.affiliation, identity.affiliation))
            .order_by(Author.id.asc())
            .limit(1)
        )
        return result.scalars().first()

    async def resolve_or_create(self, identity: AuthorIdentity) -> AuthorId:
        """Return the id of the matching author, creating one on a miss."""
        author = await self.find(identity)
        if author is None:
            author = Author(
                name=identity.name,
                email=identity.email,
                affiliation=identity.affiliation,
            )
            self.db.add(author)
            await self.db.flush()
            logger.info(
                f"Created author {author.id} while resolving paper authors",
                extra={"author_id": author.id},
            )
        return AuthorId(author.id)

    async def resolve_all(
        self, identities: tuple[AuthorIdentity, ...] | list[AuthorIdentity],
    ) -> list[AuthorId]:
        """Resolve in input order; an id already resolved is not repeated."""
        author_ids: list[AuthorId] = []
        for identity in identities:
            author_id = await self.resolve_or_create(identity)
            if author_id not in author_ids:
                author_ids.append(author_id)
        return author_ids
