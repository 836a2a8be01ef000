"""
Gift idea search endpoint for API v1.

``GET /search/{query}`` forwards the query to the external search API
and returns ``{"result": ...}``.  It does not touch the gift list.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gift_list_api.app.api.deps import get_search_service
from gift_list_api.app.services.search_service import SearchService

router = APIRouter()


@router.get("/{query}")
async def search_gifts(query: str, service: SearchService = Depends(get_search_service)) -> JSONResponse:
    """Search for gift ideas matching ``query``."""
    result = await service.search(query)
    return JSONResponse(status_code=result.status_code, content=result.body)
