"""
Pydantic models for jobs and job applications.

A job is a paid task posted by a user.  ``applicants`` is derived by
the store from the number of applications and is therefore absent
from both the create and the update payloads.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .common import CamelModel, Money, UpdateModel

JobStatus = Literal["active", "completed", "cancelled"]
JobUrgency = Literal["urgent", "normal"]
ApplicationStatus = Literal["pending", "accepted", "rejected"]


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class JobCreate(CamelModel):
    """Schema for posting a job."""

    title: str = Field(..., min_length=1, examples=["House Cleaning Service"])
    description: str = Field(..., min_length=1)
    category: str = Field(..., examples=["Cleaning"])
    budget: Money = Field(..., examples=["25000.00"])
    location: str = Field(..., examples=["Freetown, Western Area"])
    coordinates: Optional[Coordinates] = None
    user_id: int
    urgency: JobUrgency = "normal"


class Job(JobCreate):
    id: int
    status: JobStatus = "active"
    applicants: int = Field(0, ge=0)
    created_at: datetime


class JobUpdate(UpdateModel):
    """Schema for updating a job.

    All fields are optional; only provided fields will be updated.
    """

    nullable_fields = ("coordinates",)

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    budget: Optional[Money] = None
    location: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    status: Optional[JobStatus] = None
    urgency: Optional[JobUrgency] = None


class JobApplicationRequest(CamelModel):
    """Body of ``POST /jobs/{id}/applications``; the job id comes from the path."""

    user_id: int
    message: Optional[str] = None


class JobApplicationCreate(JobApplicationRequest):
    job_id: int


class JobApplication(JobApplicationCreate):
    id: int
    status: ApplicationStatus = "pending"
    created_at: datetime


class JobApplicationUpdate(UpdateModel):
    nullable_fields = ("message",)

    status: Optional[ApplicationStatus] = None
    message: Optional[str] = None
