"""
Service layer for a single gift list.

``GiftListService`` applies the four list operations (list, add,
update, delete) to one ``StorageUnit``.  Every operation validates its
input, holds the unit's lock while it talks to storage, and returns a
``ServiceResult``: the HTTP status code plus the JSON body to send.
Domain failures are converted into the ``{"error": ..., "details": ...}``
envelope here so route handlers can relay the result unchanged.

Adding a gift whose id already exists silently overwrites the stored
record; no uniqueness check is performed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

from gift_list_api.app.core.errors import (
    BadRequest,
    GiftListError,
    NotFound,
    StorageFailure,
    ValidationError,
)
from gift_list_api.app.core.storage import StorageUnit
from gift_list_api.app.schemas.gift import GiftItem, validate_gift, validate_patch

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """HTTP shaped outcome of a service operation."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class GiftListService:
    """Validated operations over the gift items of one list."""

    def __init__(self, unit: StorageUnit) -> None:
        self.unit = unit

    async def list_gifts(self) -> ServiceResult:
        """Return all gift items in storage key order."""

        async def op() -> ServiceResult:
            items = await self._all_items()
            return ServiceResult(200, [item.model_dump() for item in items])

        return await self._run("list", op)

    async def add_gift(self, payload: Any) -> ServiceResult:
        """Validate ``payload`` as a full gift item and store it."""

        async def op() -> ServiceResult:
            result = validate_gift(payload)
            if not result.ok:
                raise ValidationError("Invalid gift item", result.errors)
            gift = GiftItem(**result.value.model_dump())
            await self.unit.put(gift.id, gift.model_dump())
            logger.info("Added gift %s to list %s", gift.id, self.unit.name)
            return ServiceResult(200, gift.model_dump())

        return await self._run("add", op)

    async def update_gift(self, gift_id: Optional[str], payload: Any) -> ServiceResult:
        """Merge a partial gift item over the stored record ``gift_id``.

        The stored record must exist; otherwise the result is a 404.
        Fields absent from the patch keep their previous value and the
        id is never changed.
        """

        async def op() -> ServiceResult:
            key = self._require_id(gift_id)
            existing = await self.get_gift(key)
            if existing is None:
                raise NotFound("Gift not found")
            result = validate_patch(payload)
            if not result.ok:
                raise ValidationError("Invalid gift update", result.errors)
            updated = result.value.apply_to(existing)
            await self.unit.put(key, updated.model_dump())
            logger.info("Updated gift %s in list %s", key, self.unit.name)
            return ServiceResult(200, updated.model_dump())

        return await self._run("update", op)

    async def delete_gift(self, gift_id: Optional[str]) -> ServiceResult:
        """Delete ``gift_id``.  Deleting a missing id is not an error."""

        async def op() -> ServiceResult:
            key = self._require_id(gift_id)
            await self.unit.delete(key)
            logger.info("Deleted gift %s from list %s", key, self.unit.name)
            return ServiceResult(200, {"message": "Gift item deleted"})

        return await self._run("delete", op)

    async def get_gift(self, gift_id: str) -> Optional[GiftItem]:
        """Point lookup of a single gift; ``None`` if absent."""
        stored = await self.unit.get(gift_id)
        if stored is None:
            return None
        return self._to_item(gift_id, stored)

    async def _all_items(self) -> List[GiftItem]:
        stored = await self.unit.list()
        return [self._to_item(value.get("id", ""), value) for value in stored]

    async def _run(self, operation: str, op: Callable[[], Awaitable[ServiceResult]]) -> ServiceResult:
        async with self.unit.lock:
            try:
                return await op()
            except StorageFailure as exc:
                logger.exception("Storage failure during %s on list %s", operation, self.unit.name)
                return ServiceResult(exc.status_code, exc.to_payload())
            except GiftListError as exc:
                logger.info("Rejected %s on list %s: %s", operation, self.unit.name, exc.message)
                return ServiceResult(exc.status_code, exc.to_payload())

    @staticmethod
    def _require_id(gift_id: Optional[str]) -> str:
        if not gift_id:
            raise BadRequest("Gift ID is required")
        return gift_id

    def _to_item(self, key: str, stored: dict) -> GiftItem:
        try:
            return GiftItem.model_validate(stored)
        except ValueError as exc:
            logger.error("Stored gift %s in list %s is invalid", key, self.unit.name)
            raise StorageFailure() from exc
