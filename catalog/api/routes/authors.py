"""Author Routes — CRUD endpoints for authors.

Invariants:
    - Path id validated before the body; body validated before any DB access
    - Every author in a response carries its papers, ascending by id
    - DELETE of a sole author answers 400 Constraint Error and changes nothing

Design Decisions:
    - Thin routes: parsing in core, transactions in AuthorService
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.request_params import author_id_param, collect_query_params
from catalog.core.domain_types import AuthorId, ResourceType
from catalog.core.errors import ResourceNotFoundError
from catalog.core.validate_query import parse_author_query
from catalog.infrastructure.database import get_db
from catalog.schemas.author import AuthorListResponse, AuthorResponse
from catalog.services.author_service import AuthorService

router = APIRouter(prefix="/api/authors", tags=["authors"])


def get_author_service(db: AsyncSession = Depends(get_db)) -> AuthorService:
    return AuthorService(db)


@router.get("", response_model=AuthorListResponse)
async def list_authors(
    request: Request, service: AuthorService = Depends(get_author_service),
):
    """List authors filtered by name and affiliation."""
    query = parse_author_query(collect_query_params(request))
    page = await service.list_authors(query)
    return AuthorListResponse(
        authors=[AuthorResponse.model_validate(a) for a in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: AuthorId = Depends(author_id_param),
    service: AuthorService = Depends(get_author_service),
):
    author = await service.get_author(author_id)
    if author is None:
        raise ResourceNotFoundError(ResourceType.AUTHOR, author_id)
    return AuthorResponse.model_validate(author)


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: dict[str, Any] | None = Body(None),
    service: AuthorService = Depends(get_author_service),
):
    author = await service.create_author(body or {})
    return AuthorResponse.model_validate(author)


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: AuthorId = Depends(author_id_param),
    body: dict[str, Any] | None = Body(None),
    service: AuthorService = Depends(get_author_service),
):
    """Replace an author's name, email, and affiliation. Paper links are kept."""
    author = await service.update_author(author_id, body or {})
    return AuthorResponse.model_validate(author)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: AuthorId = Depends(author_id_param),
    service: AuthorService = Depends(get_author_service),
):
    """Delete an author unless it is the only author of some paper."""
    await service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
