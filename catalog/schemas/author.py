"""Author Schemas — author detail and listing responses."""

from catalog.schemas.summaries import AuthorSummary, CatalogSchema, PaperSummary


class AuthorResponse(AuthorSummary):
    """Author with its papers, ascending by paper id."""
    papers: list[PaperSummary] = []


class AuthorListResponse(CatalogSchema):
    authors: list[AuthorResponse]
    total: int
    limit: int
    offset: int
