"""Pydantic models for in‑app notifications."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import CamelModel

NotificationType = Literal["job", "payment", "event", "system"]


class NotificationCreate(CamelModel):
    user_id: int
    title: str = Field(..., min_length=1, examples=["Deposit Successful"])
    message: str = Field(..., min_length=1)
    type: NotificationType


class Notification(NotificationCreate):
    id: int
    is_read: bool = False
    created_at: datetime
