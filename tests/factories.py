"""Builders for valid create payloads used across the test suite."""

from datetime import datetime

from marketplace_api.app.schemas.event import EventCreate
from marketplace_api.app.schemas.job import JobCreate
from marketplace_api.app.schemas.marketplace import MarketplaceItemCreate
from marketplace_api.app.schemas.user import UserCreate


def make_user(username: str = "fatmata", **overrides) -> UserCreate:
    fields = {
        "username": username,
        "email": f"{username}@example.com",
        "password": "secret",
        "first_name": username.title(),
        "last_name": "Sesay",
        "phone": "+23276000000",
    }
    fields.update(overrides)
    return UserCreate(**fields)


def make_job(user_id: int = 1, **overrides) -> JobCreate:
    fields = {
        "title": "Paint a fence",
        "description": "Two coats, paint provided.",
        "category": "Repairs",
        "budget": "20000",
        "location": "Freetown, Western Area",
        "user_id": user_id,
    }
    fields.update(overrides)
    return JobCreate(**fields)


def make_item(user_id: int = 1, **overrides) -> MarketplaceItemCreate:
    fields = {
        "title": "Office chair",
        "description": "Ergonomic chair, barely used.",
        "price": 300000,
        "category": "Furniture",
        "condition": "used",
        "location": "Kenema",
        "user_id": user_id,
    }
    fields.update(overrides)
    return MarketplaceItemCreate(**fields)


def make_event(user_id: int = 1, **overrides) -> EventCreate:
    fields = {
        "title": "Tech Meetup",
        "description": "Lightning talks and networking.",
        "date": datetime(2026, 11, 5, 18, 0),
        "location": "Freetown",
        "venue": "Innovation Hub",
        "ticket_price": "10000.00",
        "total_tickets": 3,
        "user_id": user_id,
    }
    fields.update(overrides)
    return EventCreate(**fields)
