"""
Pydantic schemas for user reviews.

A review rates one user (the reviewee) on behalf of another (the
reviewer), optionally in the context of a job.  Creating a review
recomputes the reviewee's average rating.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel


class ReviewCreate(CamelModel):
    """Schema for creating a new review."""

    reviewer_id: int
    reviewee_id: int
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional textual comment")
    job_id: Optional[int] = None

    @field_validator("comment")
    def sanitize_comment(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from the comment and enforce a maximum length."""
        if v is None:
            return None
        v = v.strip()
        if len(v) > 1000:
            raise ValueError("Comment must be 1000 characters or fewer")
        return v


class Review(ReviewCreate):
    id: int
    created_at: datetime
