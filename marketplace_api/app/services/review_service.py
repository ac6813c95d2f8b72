"""
Business logic for reviews.

A review rates the reviewee from 1 to 5.  Storing it recomputes the
reviewee's average rating.  Reviews of unknown users and reviews of
oneself are refused.
"""

import logging
from typing import List

from . import NotFoundError
from ..core.storage import EntityStore
from ..schemas.review import Review, ReviewCreate

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for handling user reviews."""

    @classmethod
    async def create_review(cls, store: EntityStore, data: ReviewCreate) -> Review:
        if data.reviewer_id == data.reviewee_id:
            raise ValueError("Users cannot review themselves")
        with store.transaction():
            if store.get_user(data.reviewee_id) is None:
                raise NotFoundError(f"User {data.reviewee_id} not found")
            review = store.create_review(data)
            reviewee = store.get_user(data.reviewee_id)
        logger.info(
            "User %s reviewed user %s (%s stars, average now %s)",
            data.reviewer_id, data.reviewee_id, data.rating, reviewee.rating,
        )
        return review

    @classmethod
    async def list_received(cls, store: EntityStore, user_id: int) -> List[Review]:
        return store.get_reviews_for_user(user_id)

    @classmethod
    async def list_written(cls, store: EntityStore, user_id: int) -> List[Review]:
        return store.get_reviews_by_user(user_id)
