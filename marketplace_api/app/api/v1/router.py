"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new domains are introduced, include their routers
here.
"""

from fastapi import APIRouter

from .endpoints import (
    applications,
    auth,
    events,
    jobs,
    marketplace,
    notifications,
    reviews,
    tickets,
    users,
    wallet,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
router.include_router(marketplace.router, prefix="/marketplace", tags=["marketplace"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
# The following routers define their full paths internally
# (``/applications/{id}``, ``/tickets/{id}``, ``/users/{id}/wallet/...``).
router.include_router(applications.router, tags=["applications"])
router.include_router(tickets.router, tags=["tickets"])
router.include_router(wallet.router, tags=["wallet"])
