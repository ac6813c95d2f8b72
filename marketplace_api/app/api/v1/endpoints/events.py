"""
Event endpoints for API v1.

These routes provide CRUD operations for events and ticket sales.
The list endpoint returns active events ordered by date, soonest
first.  Buying a ticket returns the issued ticket; the event's
``soldTickets`` grows by one.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.common import MessageResponse
from marketplace_api.app.schemas.event import Event, EventCreate, EventTicket, EventUpdate, TicketPurchase
from marketplace_api.app.services import NotFoundError
from marketplace_api.app.services.event_service import EventService

router = APIRouter()


@router.get("", response_model=List[Event])
async def list_events(store: EntityStore = Depends(get_storage)) -> List[Event]:
    return await EventService.list_events(store)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, store: EntityStore = Depends(get_storage)) -> Event:
    return await EventService.create_event(store, event)


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: int, store: EntityStore = Depends(get_storage)) -> Event:
    event = await EventService.get_event(store, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.patch("/{event_id}", response_model=Event)
async def update_event(event_id: int, updates: EventUpdate, store: EntityStore = Depends(get_storage)) -> Event:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged.  ``soldTickets`` cannot be set.
    """
    event = await EventService.update_event(store, event_id, updates)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(event_id: int, store: EntityStore = Depends(get_storage)) -> MessageResponse:
    """Delete an event.

    Tickets already issued for it are not removed.
    """
    if not await EventService.delete_event(store, event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return MessageResponse(message="Event deleted successfully")


@router.get("/{event_id}/tickets", response_model=List[EventTicket])
async def list_event_tickets(event_id: int, store: EntityStore = Depends(get_storage)) -> List[EventTicket]:
    return await EventService.list_tickets(store, event_id)


@router.post("/{event_id}/tickets", response_model=EventTicket, status_code=status.HTTP_201_CREATED)
async def buy_ticket(
    event_id: int,
    purchase: TicketPurchase,
    store: EntityStore = Depends(get_storage),
) -> EventTicket:
    try:
        return await EventService.purchase_ticket(store, event_id, purchase)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
