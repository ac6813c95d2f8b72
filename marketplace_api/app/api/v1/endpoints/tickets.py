"""Event ticket endpoints for API v1 (status changes by ticket id)."""

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.event import EventTicket, EventTicketUpdate
from marketplace_api.app.services.event_service import EventService

router = APIRouter()


@router.patch("/tickets/{ticket_id}", response_model=EventTicket)
async def update_ticket(
    ticket_id: int,
    updates: EventTicketUpdate,
    store: EntityStore = Depends(get_storage),
) -> EventTicket:
    """Mark a ticket as used or refunded."""
    ticket = await EventService.update_ticket(store, ticket_id, updates)
    if ticket is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found")
    return ticket
