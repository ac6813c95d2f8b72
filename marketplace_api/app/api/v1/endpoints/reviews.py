"""
Review endpoints for API v1.

Reviews are created here; they are listed per user under
``/users/{id}/reviews``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.review import Review, ReviewCreate
from marketplace_api.app.services import NotFoundError
from marketplace_api.app.services.review_service import ReviewService

router = APIRouter()


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
async def create_review(review: ReviewCreate, store: EntityStore = Depends(get_storage)) -> Review:
    """Submit a review.

    The reviewee's rating becomes the average of all reviews they have
    received.
    """
    try:
        return await ReviewService.create_review(store, review)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
