"""Marketplace endpoints for API v1."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.common import ListingFilters, MessageResponse
from marketplace_api.app.schemas.marketplace import MarketplaceItem, MarketplaceItemCreate, MarketplaceItemUpdate
from marketplace_api.app.services.marketplace_service import MarketplaceService

router = APIRouter()


@router.get("", response_model=List[MarketplaceItem])
async def list_items(
    category: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    store: EntityStore = Depends(get_storage),
) -> List[MarketplaceItem]:
    """Active listings matching the filters, newest first."""
    filters = ListingFilters(category=category, location=location, search=search)
    return await MarketplaceService.list_items(store, filters)


@router.post("", response_model=MarketplaceItem, status_code=status.HTTP_201_CREATED)
async def create_item(data: MarketplaceItemCreate, store: EntityStore = Depends(get_storage)) -> MarketplaceItem:
    return await MarketplaceService.create_item(store, data)


@router.get("/{item_id}", response_model=MarketplaceItem)
async def get_item(item_id: int, store: EntityStore = Depends(get_storage)) -> MarketplaceItem:
    item = await MarketplaceService.get_item(store, item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.patch("/{item_id}", response_model=MarketplaceItem)
async def update_item(
    item_id: int,
    updates: MarketplaceItemUpdate,
    store: EntityStore = Depends(get_storage),
) -> MarketplaceItem:
    item = await MarketplaceService.update_item(store, item_id, updates)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: int, store: EntityStore = Depends(get_storage)) -> MessageResponse:
    if not await MarketplaceService.delete_item(store, item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return MessageResponse(message="Item deleted successfully")
