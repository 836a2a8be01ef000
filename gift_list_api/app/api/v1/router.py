"""
Top‑level router for version 1 of the API.

This router aggregates the gift list routes and the gift idea search
passthrough.  ``main`` mounts it both at the root and under
``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import gifts, search

router = APIRouter()

router.include_router(gifts.router, prefix="/gifts", tags=["gifts"])
router.include_router(search.router, prefix="/search", tags=["search"])
