"""
Pydantic models for events and event tickets.

``EventCreate`` is the payload for publishing an event, ``Event`` the
stored row.  ``sold_tickets`` is maintained by the store each time a
ticket is issued and is not part of any request payload.  Ticket
numbers are generated by the service layer, so the purchase request
only names the buyer.
"""

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, Field

from .common import CamelModel, Money, UpdateModel

EventStatus = Literal["active", "completed", "cancelled"]
TicketStatus = Literal["active", "used", "refunded"]


def _naive_utc(value: datetime) -> datetime:
    # Event dates are compared with each other when listing; keep them all naive UTC.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


EventDate = Annotated[datetime, AfterValidator(_naive_utc)]


class EventCreate(CamelModel):
    title: str = Field(..., min_length=1, examples=["African Music Festival"])
    description: str = Field(..., min_length=1)
    date: EventDate = Field(..., examples=["2024-12-15T19:00:00"])
    location: str = Field(..., examples=["Freetown"])
    venue: str = Field(..., examples=["National Stadium"])
    ticket_price: Money = Field(..., examples=["50000.00"])
    total_tickets: int = Field(..., gt=0, examples=[5000])
    image: Optional[str] = None
    user_id: int


class Event(EventCreate):
    id: int
    sold_tickets: int = Field(0, ge=0)
    status: EventStatus = "active"
    created_at: datetime


class EventUpdate(UpdateModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """

    nullable_fields = ("image",)

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[EventDate] = None
    location: Optional[str] = None
    venue: Optional[str] = None
    ticket_price: Optional[Money] = None
    total_tickets: Optional[int] = Field(None, gt=0)
    image: Optional[str] = None
    status: Optional[EventStatus] = None


class TicketPurchase(CamelModel):
    user_id: int


class EventTicketCreate(TicketPurchase):
    event_id: int
    ticket_number: str = Field(..., examples=["TICKET-1734289200000-k3j9x0a2m"])


class EventTicket(EventTicketCreate):
    id: int
    status: TicketStatus = "active"
    created_at: datetime


class EventTicketUpdate(UpdateModel):
    status: Optional[TicketStatus] = None
