"""
User endpoints for API v1.

Profile retrieval and update, plus the per‑user views used by the
profile page: posted jobs, applications, listed items, hosted events,
tickets, reviews and notifications.  Passwords are never returned.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.event import Event, EventTicket
from marketplace_api.app.schemas.job import Job, JobApplication
from marketplace_api.app.schemas.marketplace import MarketplaceItem
from marketplace_api.app.schemas.notification import Notification
from marketplace_api.app.schemas.review import Review
from marketplace_api.app.schemas.user import UserPublic, UserUpdate
from marketplace_api.app.services.event_service import EventService
from marketplace_api.app.services.job_service import JobService
from marketplace_api.app.services.marketplace_service import MarketplaceService
from marketplace_api.app.services.notification_service import NotificationService
from marketplace_api.app.services.review_service import ReviewService
from marketplace_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/{user_id}", response_model=UserPublic)
async def get_user(user_id: int, store: EntityStore = Depends(get_storage)) -> UserPublic:
    user = await UserService.get_user(store, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.patch("/{user_id}", response_model=UserPublic)
async def update_user(
    user_id: int,
    updates: UserUpdate,
    store: EntityStore = Depends(get_storage),
) -> UserPublic:
    """Update profile fields.

    Only the fields of ``UserUpdate`` are accepted; attempts to set
    the rating, the wallet balance or other maintained fields are
    rejected with 400.
    """
    user = await UserService.update_user(store, user_id, updates)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/{user_id}/jobs", response_model=List[Job])
async def list_user_jobs(user_id: int, store: EntityStore = Depends(get_storage)) -> List[Job]:
    return await JobService.list_user_jobs(store, user_id)


@router.get("/{user_id}/applications", response_model=List[JobApplication])
async def list_user_applications(user_id: int, store: EntityStore = Depends(get_storage)) -> List[JobApplication]:
    return await JobService.list_user_applications(store, user_id)


@router.get("/{user_id}/marketplace", response_model=List[MarketplaceItem])
async def list_user_items(user_id: int, store: EntityStore = Depends(get_storage)) -> List[MarketplaceItem]:
    return await MarketplaceService.list_user_items(store, user_id)


@router.get("/{user_id}/events", response_model=List[Event])
async def list_user_events(user_id: int, store: EntityStore = Depends(get_storage)) -> List[Event]:
    return await EventService.list_user_events(store, user_id)


@router.get("/{user_id}/tickets", response_model=List[EventTicket])
async def list_user_tickets(user_id: int, store: EntityStore = Depends(get_storage)) -> List[EventTicket]:
    return await EventService.list_user_tickets(store, user_id)


@router.get("/{user_id}/reviews", response_model=List[Review])
async def list_reviews_received(user_id: int, store: EntityStore = Depends(get_storage)) -> List[Review]:
    """Reviews where the user is the reviewee."""
    return await ReviewService.list_received(store, user_id)


@router.get("/{user_id}/reviews/written", response_model=List[Review])
async def list_reviews_written(user_id: int, store: EntityStore = Depends(get_storage)) -> List[Review]:
    return await ReviewService.list_written(store, user_id)


@router.get("/{user_id}/notifications", response_model=List[Notification])
async def list_notifications(user_id: int, store: EntityStore = Depends(get_storage)) -> List[Notification]:
    """Notifications of the user, newest first."""
    return await NotificationService.list_notifications(store, user_id)
