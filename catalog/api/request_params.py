"""Request Parameter Helpers — turn raw request data into core inputs.

Invariants:
    - A query key seen once maps to its string; a repeated key maps to a list
    - "key[]" (bracket array syntax) always maps to a list under "key"
    - Path ids are parsed by core.validate_query before any service call

Design Decisions:
    - FastAPI dependencies over Query()/Path() declarations: the core owns the
      validation messages and their order
"""

from fastapi import Request

from catalog.core.domain_types import AuthorId, PaperId
from catalog.core.validate_query import RawParams, parse_resource_id


def collect_query_params(request: Request) -> RawParams:
    """Flatten the query string into str | list[str] values."""
    params: dict[str, str | list[str]] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        if key.endswith("[]"):
            name = key[:-2]
            existing = params.get(name, [])
            existing = existing if isinstance(existing, list) else [existing]
            params[name] = existing + values
        elif key in params:
            existing = params[key]
            existing = existing if isinstance(existing, list) else [existing]
            params[key] = existing + values
        else:
            params[key] = values[0] if len(values) == 1 else values
    return params


def paper_id_param(paper_id: str) -> PaperId:
    """Path dependency: validated paper id."""
    return PaperId(parse_resource_id(paper_id))


def author_id_param(author_id: str) -> AuthorId:
    """Path dependency: validated author id."""
    return AuthorId(parse_resource_id(author_id))
