"""Query Engine — filtered, ordered, paginated listings of papers and authors.

Invariants:
    - Ordering is always ORDER BY id ASC, applied before OFFSET/LIMIT
    - total counts the full filtered set, independent of limit/offset
    - A page never holds more than limit rows
    - year is an exact match; publishedIn, name, affiliation, and author terms are
      case-insensitive substring matches with LIKE wildcards escaped
    - Each author term needs its own matching author (AND across terms); one
      author may satisfy several terms

Design Decisions:
    - Clause builders are plain functions: the same filter feeds the page query
      and the count query, so the two can never disagree
"""

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.domain_types import AuthorQuery, Page, PaperQuery
from catalog.models.author import Author
from catalog.models.paper import Paper

logger = logging.getLogger(__name__)


def paper_filter_clauses(query: PaperQuery) -> list[ColumnElement[bool]]:
    """WHERE clauses for a paper listing."""
    clauses: list[ColumnElement[bool]] = []
    if query.year is not None:
        clauses.append(Paper.year == query.year)
    if query.published_in is not None:
        clauses.append(
            Paper.published_in.icontains(query.published_in, autoescape=True),
        )
    for term in query.authors:
        clauses.append(
            Paper.authors.any(Author.name.icontains(term, autoescape=True)),
        )
    return clauses


def author_filter_clauses(query: AuthorQuery) -> list[ColumnElement[bool]]:
    """WHERE clauses for an author listing."""
    clauses: list[ColumnElement[bool]] = []
    if query.name is not None:
        clauses.append(Author.name.icontains(query.name, autoescape=True))
    if query.affiliation is not None:
        clauses.append(
            Author.affiliation.icontains(query.affiliation, autoescape=True),
        )
    return clauses


class QueryEngine:
    """Runs listing queries with the related collection eagerly loaded."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_papers(self, query: PaperQuery) -> Page[Paper]:
        clauses = paper_filter_clauses(query)
        total = await self._count(Paper, clauses)
        result = await self.db.execute(
            select(Paper)
            .where(*clauses)
            .options(selectinload(Paper.authors))
            .order_by(Paper.id.asc())
            .offset(query.offset)
            .limit(query.limit)
            .execution_options(populate_existing=True)
        )
        papers = list(result.scalars().all())
        logger.debug(f"Listed {len(papers)}/{total} papers")
        return Page(items=papers, total=total, limit=query.limit, offset=query.offset)

    async def list_authors(self, query: AuthorQuery) -> Page[Author]:
        clauses = author_filter_clauses(query)
        total = await self._count(Author, clauses)
        result = await self.db.execute(
            select(Author)
            .where(*clauses)
            .options(selectinload(Author.papers))
            .order_by(Author.id.asc())
            .offset(query.offset)
            .limit(query.limit)
            .execution_options(populate_existing=True)
        )
        authors = list(result.scalars().all())
        logger.debug(f"Listed {len(authors)}/{total} authors")
        return Page(items=authors, total=total, limit=query.limit, offset=query.offset)

    async def _count(self, model, clauses: list[ColumnElement[bool]]) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(model).where(*clauses),
        )
        return result.scalar_one()
