"""
Job endpoints for API v1.

Browse, post, edit and delete jobs, and apply to them.  The browse
endpoint only lists active jobs; cancelled or completed jobs stay
reachable through ``GET /jobs/{id}``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.common import ListingFilters, MessageResponse
from marketplace_api.app.schemas.job import Job, JobApplication, JobApplicationRequest, JobCreate, JobUpdate
from marketplace_api.app.services import NotFoundError
from marketplace_api.app.services.job_service import JobService

router = APIRouter()


@router.get("", response_model=List[Job])
async def list_jobs(
    category: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    store: EntityStore = Depends(get_storage),
) -> List[Job]:
    """Список активных заказов, самые новые первыми.

    - **category**: точное совпадение категории.
    - **location**: подстрока местоположения без учёта регистра.
    - **search**: подстрока заголовка или описания без учёта регистра.
    """
    filters = ListingFilters(category=category, location=location, search=search)
    return await JobService.list_jobs(store, filters)


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
async def create_job(data: JobCreate, store: EntityStore = Depends(get_storage)) -> Job:
    return await JobService.create_job(store, data)


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: int, store: EntityStore = Depends(get_storage)) -> Job:
    job = await JobService.get_job(store, job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


@router.patch("/{job_id}", response_model=Job)
async def update_job(job_id: int, updates: JobUpdate, store: EntityStore = Depends(get_storage)) -> Job:
    """Partially update a job.

    ``applicants`` is maintained by the store and cannot be set here.
    """
    job = await JobService.update_job(store, job_id, updates)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(job_id: int, store: EntityStore = Depends(get_storage)) -> MessageResponse:
    if not await JobService.delete_job(store, job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return MessageResponse(message="Job deleted successfully")


@router.get("/{job_id}/applications", response_model=List[JobApplication])
async def list_applications(job_id: int, store: EntityStore = Depends(get_storage)) -> List[JobApplication]:
    return await JobService.list_applications(store, job_id)


@router.post("/{job_id}/applications", response_model=JobApplication, status_code=status.HTTP_201_CREATED)
async def apply_for_job(
    job_id: int,
    request: JobApplicationRequest,
    store: EntityStore = Depends(get_storage),
) -> JobApplication:
    try:
        return await JobService.apply(store, job_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
