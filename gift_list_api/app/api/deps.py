"""
FastAPI dependencies shared by the route modules.

The storage registry and settings live on ``app.state`` (set up by
``create_app``) so that every application instance, including the
ones built by tests, resolves its own database.
"""

from fastapi import Depends, Request

from gift_list_api.app.core.config import Settings
from gift_list_api.app.core.storage import StorageRegistry
from gift_list_api.app.services.gift_list_service import GiftListService
from gift_list_api.app.services.search_service import SearchService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> StorageRegistry:
    return request.app.state.registry


def get_gift_list_service(
    settings: Settings = Depends(get_settings),
    registry: StorageRegistry = Depends(get_registry),
) -> GiftListService:
    """Resolve the storage unit of the configured list and wrap it."""
    return GiftListService(registry.get(settings.default_list_name))


def get_search_service(settings: Settings = Depends(get_settings)) -> SearchService:
    return SearchService.from_settings(settings)
