"""Business logic for in‑app notifications."""

import logging
from typing import List

from ..core.storage import EntityStore
from ..schemas.notification import Notification, NotificationCreate

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for in‑app notifications."""

    @classmethod
    async def list_notifications(cls, store: EntityStore, user_id: int) -> List[Notification]:
        """Notifications of a user, newest first."""
        return store.get_notifications(user_id)

    @classmethod
    async def create_notification(cls, store: EntityStore, data: NotificationCreate) -> Notification:
        notification = store.create_notification(data)
        logger.debug("Notification %s (%s) for user %s", notification.id, data.type, data.user_id)
        return notification

    @classmethod
    async def mark_as_read(cls, store: EntityStore, notification_id: int) -> bool:
        return store.mark_notification_as_read(notification_id)
