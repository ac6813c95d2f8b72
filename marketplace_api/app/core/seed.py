"""
Baseline sample rows.

``seed_sample_data`` loads two users, two jobs, two marketplace items
and two events into an empty store, taking ids 1 to 8 in that order.
Derived fields (applicant counts, sold tickets, ratings) start at zero
because no applications, tickets or reviews are seeded alongside
them; balances, verification and completed jobs are regular profile
data and carry sample values.
"""

import logging
from datetime import datetime, timedelta, timezone

from .storage import EntityStore

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {
        "username": "sarah_k",
        "email": "sarah@example.com",
        "password": "password123",
        "first_name": "Sarah",
        "last_name": "Kamara",
        "phone": "+23276123456",
        "profile_image": "https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
        "is_verified": True,
        "completed_jobs": 23,
        "wallet_balance": "125000.00",
        "location": "Freetown, Western Area",
        "skills": ["Mathematics", "Tutoring", "Teaching"],
    },
    {
        "username": "michael_a",
        "email": "michael@example.com",
        "password": "password123",
        "first_name": "Michael",
        "last_name": "Conteh",
        "phone": "+23276234567",
        "profile_image": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
        "is_verified": True,
        "completed_jobs": 15,
        "wallet_balance": "85000.00",
        "location": "Bo, Southern Province",
        "skills": ["Web Design", "Programming", "Digital Marketing"],
    },
]


def _sample_jobs(now: datetime) -> list:
    return [
        {
            "title": "House Cleaning Service",
            "description": "Need someone to clean a 3-bedroom house. Must be reliable and bring own supplies.",
            "category": "Cleaning",
            "budget": "25000.00",
            "location": "Freetown, Western Area",
            "coordinates": {"lat": 8.4606, "lng": -13.2317},
            "user_id": 1,
            "status": "active",
            "urgency": "normal",
            "created_at": now - timedelta(hours=2),
        },
        {
            "title": "Delivery Driver",
            "description": "Delivery packages across the city. Must have own motorbike.",
            "category": "Delivery",
            "budget": "15000.00",
            "location": "Bo, Southern Province",
            "coordinates": {"lat": 7.9644, "lng": -11.7383},
            "user_id": 2,
            "status": "active",
            "urgency": "urgent",
            "created_at": now - timedelta(hours=4),
        },
    ]


def _sample_items(now: datetime) -> list:
    return [
        {
            "title": "Samsung Galaxy A54",
            "description": "Excellent condition smartphone with all original accessories. Used for 6 months.",
            "price": "950000.00",
            "category": "Electronics",
            "condition": "used",
            "images": ["https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?w=300&h=200&fit=crop"],
            "location": "Freetown",
            "user_id": 1,
            "status": "active",
            "created_at": now - timedelta(days=2),
        },
        {
            "title": "HP Laptop 15-inch",
            "description": "Great laptop for work and study. Intel i5 processor, 8GB RAM, 256GB SSD.",
            "price": "1200000.00",
            "category": "Electronics",
            "condition": "used",
            "images": ["https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=300&h=200&fit=crop"],
            "location": "Makeni",
            "user_id": 2,
            "status": "active",
            "created_at": now - timedelta(days=3),
        },
    ]


def _sample_events(now: datetime) -> list:
    return [
        {
            "title": "African Music Festival",
            "description": (
                "Join us for an amazing night of traditional and modern African music "
                "featuring top artists from across West Africa."
            ),
            "date": datetime(2024, 12, 15, 19, 0),
            "location": "Freetown",
            "venue": "National Stadium",
            "ticket_price": "50000.00",
            "total_tickets": 5000,
            "image": "https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=500&h=250&fit=crop",
            "user_id": 1,
            "status": "active",
            "created_at": now,
        },
        {
            "title": "Young Entrepreneurs Summit",
            "description": (
                "Network with fellow entrepreneurs, learn from successful business leaders, "
                "and discover new opportunities."
            ),
            "date": datetime(2024, 12, 20, 9, 0),
            "location": "Freetown",
            "venue": "Bintumani Hotel",
            "ticket_price": "75000.00",
            "total_tickets": 300,
            "image": "https://images.unsplash.com/photo-1515187029135-18ee286d815b?w=500&h=250&fit=crop",
            "user_id": 2,
            "status": "active",
            "created_at": now,
        },
    ]


def seed_sample_data(store: EntityStore) -> None:
    """Load the baseline rows into ``store``."""
    now = datetime.now(timezone.utc)
    with store.transaction():
        store.load("users", SAMPLE_USERS)
        store.load("jobs", _sample_jobs(now))
        store.load("marketplace_items", _sample_items(now))
        store.load("events", _sample_events(now))
    logger.info("Seeded sample data (last id %s)", store.last_id)
