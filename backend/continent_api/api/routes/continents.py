"""Continent Routes — GET endpoints for continent lookup by path parameter.

Invariants:
    - GET /continents/{key} delegates entirely to ContinentLookupHandler
    - Handler sees the raw (still percent-encoded) request path
    - Response status, content type and body come from the handler unchanged
    - GET /continents lists lookup keys in table order

Design Decisions:
    - {key:path} converter: keys containing "/" or empty keys still reach the
      handler and take the miss path instead of a framework 404
    - Handler receives the full request path, not the converted parameter,
      so prefix stripping stays in one place
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from continent_api.schemas.continent import ContinentIndex
from continent_api.services.lookup_continent import (
    ContinentLookupHandler, get_lookup_handler,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/continents", tags=["continents"])


def raw_request_path(request: Request) -> str:
    """Request path before percent-decoding; query string excluded."""
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        # raw_path is optional in ASGI; fall back to the decoded path
        return request.url.path
    return raw_path.decode("latin-1")


@router.get("", response_model=ContinentIndex)
async def list_continents(
    handler: ContinentLookupHandler = Depends(get_lookup_handler),
):
    """List the lookup keys served by this API."""
    keys = list(handler.table)
    logger.debug(f"Listing {len(keys)} continents", extra={"status_code": 200})
    return ContinentIndex(continents=keys)


@router.get("/{key:path}")
async def get_continent(
    request: Request,
    handler: ContinentLookupHandler = Depends(get_lookup_handler),
):
    """Look up one continent by its underscore-form key."""
    result = handler.handle(raw_request_path(request))
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.content_type,
    )
