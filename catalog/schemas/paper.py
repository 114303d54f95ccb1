"""Paper Schemas — paper detail and listing responses."""

from catalog.schemas.summaries import AuthorSummary, CatalogSchema, PaperSummary


class PaperResponse(PaperSummary):
    """Paper with its authors, ascending by author id."""
    authors: list[AuthorSummary] = []


class PaperListResponse(CatalogSchema):
    papers: list[PaperResponse]
    total: int
    limit: int
    offset: int
