"""
In‑memory entity store.

``EntityStore`` holds every collection of the marketplace (users,
jobs, job applications, marketplace items, events, event tickets,
reviews and notifications) for the lifetime of the process.  Nothing
is persisted; a restart starts from an empty store (or from the
sample rows loaded by ``core.seed``).

Conventions shared by every collection:

* ids come from one ``IdSequence`` shared by all entity types, so
  ids are unique across the whole store but are not per‑type
  sequence numbers;
* lookups by id return ``None`` when the row is absent, deletes and
  ``mark_notification_as_read`` return ``False``; nothing raises for a
  missing id;
* callers always receive deep copies, so mutating a returned model
  never changes stored state;
* partial updates take the typed ``*Update`` model of the entity and
  merge only the fields that were provided.

All public methods run under a single re‑entrant lock.  Compound
writes (application + applicant count, ticket + sold count, review +
rating) happen inside one critical section, so no reader can observe
the first effect without the second.  ``transaction`` exposes the same
lock to callers that need a read‑check‑write sequence, such as a
wallet withdrawal.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, TypeVar, Union

from fastapi import Request
from pydantic import BaseModel

from ..schemas.common import ListingFilters, format_amount, parse_amount
from ..schemas.event import Event, EventCreate, EventTicket, EventTicketCreate, EventTicketUpdate, EventUpdate
from ..schemas.job import Job, JobApplication, JobApplicationCreate, JobApplicationUpdate, JobCreate, JobUpdate
from ..schemas.marketplace import MarketplaceItem, MarketplaceItemCreate, MarketplaceItemUpdate
from ..schemas.notification import Notification, NotificationCreate
from ..schemas.review import Review, ReviewCreate
from ..schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
Amount = Union[int, float, str, Decimal]


class IdSequence:
    """Monotonic identifier counter shared by every entity type."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    @property
    def last(self) -> int:
        """Most recently assigned id (``start - 1`` before the first insert)."""
        with self._lock:
            return self._next - 1


class EntityStore:
    """Process‑lifetime repository for all marketplace entities."""

    _MODELS = {
        "users": User,
        "jobs": Job,
        "job_applications": JobApplication,
        "marketplace_items": MarketplaceItem,
        "events": Event,
        "event_tickets": EventTicket,
        "reviews": Review,
        "notifications": Notification,
    }

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._ids = IdSequence()
        self._users: Dict[int, User] = {}
        self._jobs: Dict[int, Job] = {}
        self._job_applications: Dict[int, JobApplication] = {}
        self._marketplace_items: Dict[int, MarketplaceItem] = {}
        self._events: Dict[int, Event] = {}
        self._event_tickets: Dict[int, EventTicket] = {}
        self._reviews: Dict[int, Review] = {}
        self._notifications: Dict[int, Notification] = {}

    @contextmanager
    def transaction(self) -> Iterator["EntityStore"]:
        """Hold the store lock across several calls."""
        with self._lock:
            yield self

    @property
    def last_id(self) -> int:
        return self._ids.last

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _table(self, collection: str) -> Dict[int, Any]:
        if collection not in self._MODELS:
            raise KeyError(f"Unknown collection: {collection}")
        return getattr(self, f"_{collection}")

    def _insert(self, table: Dict[int, T], model: type, fields: Dict[str, Any]) -> T:
        entity = model.model_validate({**fields, "id": self._ids.next()})
        table[entity.id] = entity
        logger.debug("Stored %s %s", model.__name__, entity.id)
        return entity.model_copy(deep=True)

    @staticmethod
    def _get(table: Dict[int, T], entity_id: int) -> Optional[T]:
        entity = table.get(entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    @staticmethod
    def _merge(table: Dict[int, T], entity_id: int, changes: Dict[str, Any]) -> Optional[T]:
        entity = table.get(entity_id)
        if entity is None:
            return None
        merged = type(entity).model_validate({**entity.model_dump(), **changes})
        table[entity_id] = merged
        return merged.model_copy(deep=True)

    @staticmethod
    def _select(table: Dict[int, T], predicate: Callable[[T], bool]) -> List[T]:
        return [row.model_copy(deep=True) for row in table.values() if predicate(row)]

    @staticmethod
    def _changes(updates: BaseModel) -> Dict[str, Any]:
        # An explicit null is a provided value; the update models only allow it for nullable fields.
        return updates.model_dump(exclude_unset=True)

    @staticmethod
    def _browse(table: Dict[int, T], filters: Optional[ListingFilters]) -> List[T]:
        """Active rows matching ``filters``, newest first."""
        filters = filters or ListingFilters()
        rows = [row for row in table.values() if row.status == "active"]
        if filters.category:
            rows = [row for row in rows if row.category == filters.category]
        if filters.location:
            needle = filters.location.lower()
            rows = [row for row in rows if needle in row.location.lower()]
        if filters.search:
            needle = filters.search.lower()
            rows = [
                row for row in rows
                if needle in row.title.lower() or needle in row.description.lower()
            ]
        rows.sort(key=lambda row: (row.created_at, row.id), reverse=True)
        return [row.model_copy(deep=True) for row in rows]

    def load(self, collection: str, rows: Iterable[Dict[str, Any]]) -> List[int]:
        """Insert fully specified rows, assigning ids from the shared sequence.

        Used to seed sample data.  Unlike the ``create_*`` methods no
        defaults are forced, so derived fields are taken as given.
        """
        model = self._MODELS.get(collection)
        if model is None:
            raise KeyError(f"Unknown collection: {collection}")
        with self._lock:
            table = self._table(collection)
            now = self._now()
            ids = []
            for row in rows:
                fields = dict(row)
                if "created_at" in model.model_fields:
                    fields.setdefault("created_at", now)
                ids.append(self._insert(table, model, fields).id)
            return ids

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._get(self._users, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            matches = self._select(self._users, lambda user: user.email == email)
            return matches[0] if matches else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            matches = self._select(self._users, lambda user: user.username == username)
            return matches[0] if matches else None

    def create_user(self, data: UserCreate) -> User:
        """Store a new user with a zero balance, no rating and no completed jobs.

        Uniqueness of ``email`` and ``username`` is checked by the
        caller (``UserService.register``) before this is invoked.
        """
        with self._lock:
            fields = data.model_dump()
            fields.update(is_verified=False, rating="0.00", completed_jobs=0, wallet_balance="0.00")
            return self._insert(self._users, User, fields)

    def update_user(self, user_id: int, updates: UserUpdate) -> Optional[User]:
        with self._lock:
            return self._merge(self._users, user_id, self._changes(updates))

    def adjust_user_balance(self, user_id: int, delta: Amount) -> Optional[User]:
        """Add ``delta`` (may be negative) to the user's wallet balance.

        The arithmetic is decimal and the result is stored with two
        fraction digits.  No overdraft check happens here; see
        ``WalletService.withdraw``.
        """
        amount = parse_amount(delta)
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            balance = parse_amount(user.wallet_balance) + amount
            return self._merge(self._users, user_id, {"wallet_balance": format_amount(balance)})

    # ------------------------------------------------------------------
    # Jobs
    # ------------------------------------------------------------------
    def list_jobs(self, filters: Optional[ListingFilters] = None) -> List[Job]:
        with self._lock:
            return self._browse(self._jobs, filters)

    def get_job(self, job_id: int) -> Optional[Job]:
        with self._lock:
            return self._get(self._jobs, job_id)

    def get_jobs_by_user(self, user_id: int) -> List[Job]:
        with self._lock:
            return self._select(self._jobs, lambda job: job.user_id == user_id)

    def create_job(self, data: JobCreate) -> Job:
        with self._lock:
            fields = data.model_dump()
            fields.update(status="active", applicants=0, created_at=self._now())
            return self._insert(self._jobs, Job, fields)

    def update_job(self, job_id: int, updates: JobUpdate) -> Optional[Job]:
        with self._lock:
            return self._merge(self._jobs, job_id, self._changes(updates))

    def delete_job(self, job_id: int) -> bool:
        # Applications of a deleted job are kept and stay reachable by id.
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    # ------------------------------------------------------------------
    # Job applications
    # ------------------------------------------------------------------
    def get_job_application(self, application_id: int) -> Optional[JobApplication]:
        with self._lock:
            return self._get(self._job_applications, application_id)

    def get_job_applications(self, job_id: int) -> List[JobApplication]:
        with self._lock:
            return self._select(self._job_applications, lambda app: app.job_id == job_id)

    def get_job_applications_by_user(self, user_id: int) -> List[JobApplication]:
        with self._lock:
            return self._select(self._job_applications, lambda app: app.user_id == user_id)

    def create_job_application(self, data: JobApplicationCreate) -> JobApplication:
        """Store an application and bump the job's applicant count.

        A missing parent job is tolerated: the application is stored
        and no count changes.
        """
        with self._lock:
            fields = data.model_dump()
            fields.update(status="pending", created_at=self._now())
            application = self._insert(self._job_applications, JobApplication, fields)
            job = self._jobs.get(data.job_id)
            if job is not None:
                self._merge(self._jobs, job.id, {"applicants": job.applicants + 1})
            return application

    def update_job_application(
        self, application_id: int, updates: JobApplicationUpdate
    ) -> Optional[JobApplication]:
        with self._lock:
            return self._merge(self._job_applications, application_id, self._changes(updates))

    # ------------------------------------------------------------------
    # Marketplace items
    # ------------------------------------------------------------------
    def list_marketplace_items(self, filters: Optional[ListingFilters] = None) -> List[MarketplaceItem]:
        with self._lock:
            return self._browse(self._marketplace_items, filters)

    def get_marketplace_item(self, item_id: int) -> Optional[MarketplaceItem]:
        with self._lock:
            return self._get(self._marketplace_items, item_id)

    def get_marketplace_items_by_user(self, user_id: int) -> List[MarketplaceItem]:
        with self._lock:
            return self._select(self._marketplace_items, lambda item: item.user_id == user_id)

    def create_marketplace_item(self, data: MarketplaceItemCreate) -> MarketplaceItem:
        with self._lock:
            fields = data.model_dump()
            fields.update(status="active", created_at=self._now())
            return self._insert(self._marketplace_items, MarketplaceItem, fields)

    def update_marketplace_item(
        self, item_id: int, updates: MarketplaceItemUpdate
    ) -> Optional[MarketplaceItem]:
        with self._lock:
            return self._merge(self._marketplace_items, item_id, self._changes(updates))

    def delete_marketplace_item(self, item_id: int) -> bool:
        with self._lock:
            return self._marketplace_items.pop(item_id, None) is not None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self) -> List[Event]:
        """Active events, soonest first."""
        with self._lock:
            rows = [event for event in self._events.values() if event.status == "active"]
            rows.sort(key=lambda event: (event.date, event.id))
            return [event.model_copy(deep=True) for event in rows]

    def get_event(self, event_id: int) -> Optional[Event]:
        with self._lock:
            return self._get(self._events, event_id)

    def get_events_by_user(self, user_id: int) -> List[Event]:
        with self._lock:
            return self._select(self._events, lambda event: event.user_id == user_id)

    def create_event(self, data: EventCreate) -> Event:
        with self._lock:
            fields = data.model_dump()
            fields.update(status="active", sold_tickets=0, created_at=self._now())
            return self._insert(self._events, Event, fields)

    def update_event(self, event_id: int, updates: EventUpdate) -> Optional[Event]:
        with self._lock:
            return self._merge(self._events, event_id, self._changes(updates))

    def delete_event(self, event_id: int) -> bool:
        with self._lock:
            return self._events.pop(event_id, None) is not None

    # ------------------------------------------------------------------
    # Event tickets
    # ------------------------------------------------------------------
    def get_event_ticket(self, ticket_id: int) -> Optional[EventTicket]:
        with self._lock:
            return self._get(self._event_tickets, ticket_id)

    def get_event_tickets(self, event_id: int) -> List[EventTicket]:
        with self._lock:
            return self._select(self._event_tickets, lambda ticket: ticket.event_id == event_id)

    def get_event_tickets_by_user(self, user_id: int) -> List[EventTicket]:
        with self._lock:
            return self._select(self._event_tickets, lambda ticket: ticket.user_id == user_id)

    def create_event_ticket(self, data: EventTicketCreate) -> EventTicket:
        """Store a ticket and bump the event's sold count.

        ``ticket_number`` is not checked for uniqueness.  A missing
        parent event is tolerated.
        """
        with self._lock:
            fields = data.model_dump()
            fields.update(status="active", created_at=self._now())
            ticket = self._insert(self._event_tickets, EventTicket, fields)
            event = self._events.get(data.event_id)
            if event is not None:
                self._merge(self._events, event.id, {"sold_tickets": event.sold_tickets + 1})
            return ticket

    def update_event_ticket(self, ticket_id: int, updates: EventTicketUpdate) -> Optional[EventTicket]:
        with self._lock:
            return self._merge(self._event_tickets, ticket_id, self._changes(updates))

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def get_reviews_for_user(self, user_id: int) -> List[Review]:
        """Reviews where ``user_id`` is the reviewee."""
        with self._lock:
            return self._select(self._reviews, lambda review: review.reviewee_id == user_id)

    def get_reviews_by_user(self, user_id: int) -> List[Review]:
        """Reviews written by ``user_id``."""
        with self._lock:
            return self._select(self._reviews, lambda review: review.reviewer_id == user_id)

    def create_review(self, data: ReviewCreate) -> Review:
        """Store a review and recompute the reviewee's average rating.

        The rating is the unweighted mean over every stored review of
        the reviewee, rounded half‑up to two decimals.
        """
        with self._lock:
            review = self._insert(self._reviews, Review, {**data.model_dump(), "created_at": self._now()})
            ratings = [r.rating for r in self._reviews.values() if r.reviewee_id == data.reviewee_id]
            average = Decimal(sum(ratings)) / len(ratings)
            self._merge(self._users, data.reviewee_id, {"rating": format_amount(average)})
            return review

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def get_notifications(self, user_id: int) -> List[Notification]:
        """Notifications of ``user_id``, newest first."""
        with self._lock:
            rows = self._select(self._notifications, lambda n: n.user_id == user_id)
            rows.sort(key=lambda n: (n.created_at, n.id), reverse=True)
            return rows

    def create_notification(self, data: NotificationCreate) -> Notification:
        with self._lock:
            fields = data.model_dump()
            fields.update(is_read=False, created_at=self._now())
            return self._insert(self._notifications, Notification, fields)

    def mark_notification_as_read(self, notification_id: int) -> bool:
        with self._lock:
            return self._merge(self._notifications, notification_id, {"is_read": True}) is not None


def get_storage(request: Request) -> EntityStore:
    """FastAPI dependency returning the store created by ``create_app``."""
    return request.app.state.storage
