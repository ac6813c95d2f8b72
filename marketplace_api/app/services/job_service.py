"""
Business logic for jobs and job applications.

Jobs are browsed through ``list_jobs`` which only shows active jobs;
cancelled and completed jobs remain reachable by id.  Applying to a
job stores the application and increments the job's applicant count
in one store operation.
"""

import logging
from typing import List, Optional

from . import NotFoundError
from ..core.storage import EntityStore
from ..schemas.common import ListingFilters
from ..schemas.job import (
    Job,
    JobApplication,
    JobApplicationCreate,
    JobApplicationRequest,
    JobApplicationUpdate,
    JobCreate,
    JobUpdate,
)

logger = logging.getLogger(__name__)


class JobService:
    """Сервис для управления заказами и откликами."""

    @classmethod
    async def list_jobs(cls, store: EntityStore, filters: Optional[ListingFilters] = None) -> List[Job]:
        """Active jobs matching ``filters``, most recent first.

        - ``category``: exact match.
        - ``location``: case‑insensitive substring.
        - ``search``: case‑insensitive substring of title or description.
        """
        return store.list_jobs(filters)

    @classmethod
    async def get_job(cls, store: EntityStore, job_id: int) -> Optional[Job]:
        return store.get_job(job_id)

    @classmethod
    async def list_user_jobs(cls, store: EntityStore, user_id: int) -> List[Job]:
        return store.get_jobs_by_user(user_id)

    @classmethod
    async def create_job(cls, store: EntityStore, data: JobCreate) -> Job:
        job = store.create_job(data)
        logger.info("User %s posted job %s '%s'", data.user_id, job.id, job.title)
        return job

    @classmethod
    async def update_job(cls, store: EntityStore, job_id: int, updates: JobUpdate) -> Optional[Job]:
        return store.update_job(job_id, updates)

    @classmethod
    async def delete_job(cls, store: EntityStore, job_id: int) -> bool:
        deleted = store.delete_job(job_id)
        if deleted:
            logger.info("Deleted job %s", job_id)
        return deleted

    @classmethod
    async def apply(cls, store: EntityStore, job_id: int, request: JobApplicationRequest) -> JobApplication:
        """Apply to a job.

        Raises ``NotFoundError`` if the job does not exist and
        ``ValueError`` if it is no longer active.
        """
        with store.transaction():
            job = store.get_job(job_id)
            if job is None:
                raise NotFoundError(f"Job {job_id} not found")
            if job.status != "active":
                raise ValueError("Job is not accepting applications")
            application = store.create_job_application(
                JobApplicationCreate(job_id=job_id, user_id=request.user_id, message=request.message)
            )
        logger.info("User %s applied to job %s", request.user_id, job_id)
        return application

    @classmethod
    async def list_applications(cls, store: EntityStore, job_id: int) -> List[JobApplication]:
        return store.get_job_applications(job_id)

    @classmethod
    async def list_user_applications(cls, store: EntityStore, user_id: int) -> List[JobApplication]:
        return store.get_job_applications_by_user(user_id)

    @classmethod
    async def update_application(
        cls, store: EntityStore, application_id: int, updates: JobApplicationUpdate
    ) -> Optional[JobApplication]:
        return store.update_job_application(application_id, updates)
