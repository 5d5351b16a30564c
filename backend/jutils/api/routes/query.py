"""Query Route — echoes one decoded query parameter of the current request.

Invariants:
    - The request URL is the QueryProvider (same view as a browser's location.search)
    - Absent parameter → 200 with value "" (never 404)
"""

from fastapi import APIRouter, Request

from jutils.core.query_params import get_query_by_name
from jutils.infrastructure.request_query import UrlQueryProvider
from jutils.schemas.text import QueryValue

router = APIRouter(prefix="/api/v1/query", tags=["query"])


@router.get("/{name}", response_model=QueryValue)
async def read_query_param(name: str, request: Request):
    """Return the decoded value of ``name`` from this request's query string."""
    provider = UrlQueryProvider(str(request.url))
    return QueryValue(name=name, value=get_query_by_name(name, provider))
