"""Business logic for marketplace listings."""

import logging
from typing import List, Optional

from ..core.storage import EntityStore
from ..schemas.common import ListingFilters
from ..schemas.marketplace import MarketplaceItem, MarketplaceItemCreate, MarketplaceItemUpdate

logger = logging.getLogger(__name__)


class MarketplaceService:
    """Сервис для объявлений о продаже товаров."""

    @classmethod
    async def list_items(cls, store: EntityStore, filters: Optional[ListingFilters] = None) -> List[MarketplaceItem]:
        return store.list_marketplace_items(filters)

    @classmethod
    async def get_item(cls, store: EntityStore, item_id: int) -> Optional[MarketplaceItem]:
        return store.get_marketplace_item(item_id)

    @classmethod
    async def list_user_items(cls, store: EntityStore, user_id: int) -> List[MarketplaceItem]:
        return store.get_marketplace_items_by_user(user_id)

    @classmethod
    async def create_item(cls, store: EntityStore, data: MarketplaceItemCreate) -> MarketplaceItem:
        item = store.create_marketplace_item(data)
        logger.info("User %s listed item %s '%s'", data.user_id, item.id, item.title)
        return item

    @classmethod
    async def update_item(
        cls, store: EntityStore, item_id: int, updates: MarketplaceItemUpdate
    ) -> Optional[MarketplaceItem]:
        return store.update_marketplace_item(item_id, updates)

    @classmethod
    async def delete_item(cls, store: EntityStore, item_id: int) -> bool:
        deleted = store.delete_marketplace_item(item_id)
        if deleted:
            logger.info("Deleted marketplace item %s", item_id)
        return deleted
