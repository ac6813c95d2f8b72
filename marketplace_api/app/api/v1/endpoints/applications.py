"""
Job application endpoints for API v1.

Applications are created under ``/jobs/{id}/applications``; this
router only exposes status changes by application id, so it defines
its paths without a prefix.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.job import JobApplication, JobApplicationUpdate
from marketplace_api.app.services.job_service import JobService

router = APIRouter()


@router.patch("/applications/{application_id}", response_model=JobApplication)
async def update_application(
    application_id: int,
    updates: JobApplicationUpdate,
    store: EntityStore = Depends(get_storage),
) -> JobApplication:
    """Accept or reject an application, or edit its message."""
    application = await JobService.update_application(store, application_id, updates)
    if application is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return application
