"""
Business logic for events and ticket sales.

Events are listed soonest first.  Buying a ticket generates a ticket
number of the form ``TICKET-<epoch ms>-<9 base36 chars>`` and stores
the ticket; the store bumps the event's sold count in the same
operation.  Sales are refused for missing, inactive and sold‑out
events.
"""

import logging
import random
import string
import time
from typing import List, Optional

from . import NotFoundError
from ..core.storage import EntityStore
from ..schemas.event import (
    Event,
    EventCreate,
    EventTicket,
    EventTicketCreate,
    EventTicketUpdate,
    EventUpdate,
    TicketPurchase,
)

logger = logging.getLogger(__name__)

_TICKET_ALPHABET = string.digits + string.ascii_lowercase


def generate_ticket_number() -> str:
    suffix = "".join(random.choices(_TICKET_ALPHABET, k=9))
    return f"TICKET-{int(time.time() * 1000)}-{suffix}"


class EventService:
    """Сервис для управления мероприятиями и билетами."""

    @classmethod
    async def list_events(cls, store: EntityStore) -> List[Event]:
        return store.list_events()

    @classmethod
    async def get_event(cls, store: EntityStore, event_id: int) -> Optional[Event]:
        return store.get_event(event_id)

    @classmethod
    async def list_user_events(cls, store: EntityStore, user_id: int) -> List[Event]:
        return store.get_events_by_user(user_id)

    @classmethod
    async def create_event(cls, store: EntityStore, data: EventCreate) -> Event:
        event = store.create_event(data)
        logger.info("User %s is hosting event %s '%s'", data.user_id, event.id, event.title)
        return event

    @classmethod
    async def update_event(cls, store: EntityStore, event_id: int, updates: EventUpdate) -> Optional[Event]:
        return store.update_event(event_id, updates)

    @classmethod
    async def delete_event(cls, store: EntityStore, event_id: int) -> bool:
        """Delete an event.  Issued tickets are kept."""
        deleted = store.delete_event(event_id)
        if deleted:
            logger.info("Deleted event %s", event_id)
        return deleted

    @classmethod
    async def purchase_ticket(cls, store: EntityStore, event_id: int, purchase: TicketPurchase) -> EventTicket:
        """Issue a ticket for ``event_id`` to ``purchase.user_id``.

        Raises ``NotFoundError`` if the event does not exist and
        ``ValueError`` if it is not active or has no tickets left.
        """
        with store.transaction():
            event = store.get_event(event_id)
            if event is None:
                raise NotFoundError(f"Event {event_id} not found")
            if event.status != "active":
                raise ValueError("Event is not selling tickets")
            if event.sold_tickets >= event.total_tickets:
                raise ValueError("Event is sold out")
            ticket = store.create_event_ticket(
                EventTicketCreate(
                    event_id=event_id,
                    user_id=purchase.user_id,
                    ticket_number=generate_ticket_number(),
                )
            )
        logger.info("User %s bought ticket %s for event %s", purchase.user_id, ticket.ticket_number, event_id)
        return ticket

    @classmethod
    async def list_tickets(cls, store: EntityStore, event_id: int) -> List[EventTicket]:
        return store.get_event_tickets(event_id)

    @classmethod
    async def list_user_tickets(cls, store: EntityStore, user_id: int) -> List[EventTicket]:
        return store.get_event_tickets_by_user(user_id)

    @classmethod
    async def update_ticket(
        cls, store: EntityStore, ticket_id: int, updates: EventTicketUpdate
    ) -> Optional[EventTicket]:
        return store.update_event_ticket(ticket_id, updates)
