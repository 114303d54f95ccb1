"""Paper Routes — CRUD endpoints for papers.

Invariants:
    - Path id validated before the body; body validated before any DB access
    - Every paper in a response carries its authors, ascending by id
    - Failures are raised as CatalogError subclasses and rendered by error_handlers

Design Decisions:
    - Thin routes: parsing in core, transactions in PaperService
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.request_params import collect_query_params, paper_id_param
from catalog.core.domain_types import PaperId, ResourceType
from catalog.core.errors import ResourceNotFoundError
from catalog.core.validate_query import parse_paper_query
from catalog.infrastructure.database import get_db
from catalog.schemas.paper import PaperListResponse, PaperResponse
from catalog.services.paper_service import PaperService

router = APIRouter(prefix="/api/papers", tags=["papers"])


def get_paper_service(db: AsyncSession = Depends(get_db)) -> PaperService:
    return PaperService(db)


@router.get("", response_model=PaperListResponse)
async def list_papers(
    request: Request, service: PaperService = Depends(get_paper_service),
):
    """List papers filtered by year, publishedIn, and author (repeatable)."""
    query = parse_paper_query(collect_query_params(request))
    page = await service.list_papers(query)
    return PaperListResponse(
        papers=[PaperResponse.model_validate(p) for p in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{paper_id}", response_model=PaperResponse)
async def get_paper(
    paper_id: PaperId = Depends(paper_id_param),
    service: PaperService = Depends(get_paper_service),
):
    paper = await service.get_paper(paper_id)
    if paper is None:
        raise ResourceNotFoundError(ResourceType.PAPER, paper_id)
    return PaperResponse.model_validate(paper)


@router.post(
    "", response_model=PaperResponse, status_code=status.HTTP_201_CREATED,
)
async def create_paper(
    body: dict[str, Any] | None = Body(None),
    service: PaperService = Depends(get_paper_service),
):
    """Create a paper, reusing authors whose (name, email, affiliation) already exist."""
    paper = await service.create_paper(body or {})
    return PaperResponse.model_validate(paper)


@router.put("/{paper_id}", response_model=PaperResponse)
async def update_paper(
    paper_id: PaperId = Depends(paper_id_param),
    body: dict[str, Any] | None = Body(None),
    service: PaperService = Depends(get_paper_service),
):
    """Replace a paper's fields and its full author set."""
    paper = await service.update_paper(paper_id, body or {})
    return PaperResponse.model_validate(paper)


@router.delete("/{paper_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_paper(
    paper_id: PaperId = Depends(paper_id_param),
    service: PaperService = Depends(get_paper_service),
):
    """Delete a paper. Its authors remain."""
    await service.delete_paper(paper_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
