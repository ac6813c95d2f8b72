"""Notification endpoints for API v1."""

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.common import MessageResponse
from marketplace_api.app.schemas.notification import Notification, NotificationCreate
from marketplace_api.app.services.notification_service import NotificationService

router = APIRouter()


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification: NotificationCreate,
    store: EntityStore = Depends(get_storage),
) -> Notification:
    return await NotificationService.create_notification(store, notification)


@router.patch("/{notification_id}/read", response_model=MessageResponse)
async def mark_as_read(notification_id: int, store: EntityStore = Depends(get_storage)) -> MessageResponse:
    if not await NotificationService.mark_as_read(store, notification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return MessageResponse(message="Notification marked as read")
