"""
Gift list endpoints for API v1.

These routes expose the four list operations.  Each handler resolves
the storage unit of the configured list, forwards the request to
``GiftListService`` and relays the ``ServiceResult`` verbatim: the
status code and JSON body (the entity, the entity array, or the
``{"error": ..., "details": ...}`` envelope).  Request bodies are read
as raw JSON so that validation failures use the same envelope instead
of FastAPI's default 422 response.

``PUT /gifts/`` and ``DELETE /gifts/`` without an id segment answer
with 400 "Gift ID is required".  Ids are opaque and may contain ``/``
(sent encoded as ``%2F``), so the id routes capture the rest of the path.
"""

import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gift_list_api.app.api.deps import get_gift_list_service
from gift_list_api.app.services.gift_list_service import GiftListService, ServiceResult

router = APIRouter()


def _respond(result: ServiceResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.body)


async def _read_json(request: Request) -> Optional[Any]:
    """Decode the request body; malformed or empty bodies become ``None``."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


@router.get("", include_in_schema=False)
@router.get("/")
async def list_gifts(service: GiftListService = Depends(get_gift_list_service)) -> JSONResponse:
    """Return every gift item of the list, unsorted."""
    return _respond(await service.list_gifts())


@router.post("", include_in_schema=False)
@router.post("/")
async def add_gift(request: Request, service: GiftListService = Depends(get_gift_list_service)) -> JSONResponse:
    """Add a gift item.  An existing item with the same id is overwritten."""
    payload = await _read_json(request)
    return _respond(await service.add_gift(payload))


@router.put("/")
async def update_gift_without_id(
    request: Request, service: GiftListService = Depends(get_gift_list_service)
) -> JSONResponse:
    return _respond(await service.update_gift(None, await _read_json(request)))


@router.put("/{gift_id:path}")
async def update_gift(
    gift_id: str, request: Request, service: GiftListService = Depends(get_gift_list_service)
) -> JSONResponse:
    """Apply a partial update to an existing gift item.

    Returns HTTP 404 if the gift does not exist and 400 with field
    details if the patch is invalid.
    """
    payload = await _read_json(request)
    return _respond(await service.update_gift(gift_id, payload))


@router.delete("/")
async def delete_gift_without_id(service: GiftListService = Depends(get_gift_list_service)) -> JSONResponse:
    return _respond(await service.delete_gift(None))


@router.delete("/{gift_id:path}")
async def delete_gift(gift_id: str, service: GiftListService = Depends(get_gift_list_service)) -> JSONResponse:
    """Delete a gift item.  Deleting an unknown id still succeeds."""
    return _respond(await service.delete_gift(gift_id))
