"""Entity Summaries — one entity without its related collection.

Invariants:
    - PaperSummary never includes authors; AuthorSummary never includes papers,
      so nesting stops after one level
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogSchema(BaseModel):
    """Base for all response schemas: ORM-readable, camelCase aliases."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )


class AuthorSummary(CatalogSchema):
    id: int
    name: str
    email: str | None = None
    affiliation: str | None = None
    created_at: datetime
    updated_at: datetime


class PaperSummary(CatalogSchema):
    id: int
    title: str
    published_in: str
    year: int
    created_at: datetime
    updated_at: datetime
