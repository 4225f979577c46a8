"""
API routes for delivery jobs.

Endpoints:
- GET  /api/jobs          List open jobs (optional ?q= search on title/description)
- GET  /api/jobs/mine     List jobs posted by the current client
- POST /api/jobs          Post a new job (clients only)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fasttruck.api.dependencies import get_backend
from fasttruck.auth.dependencies import get_current_user, get_token
from fasttruck.marketplace.base import BackendError, MarketplaceBackend
from fasttruck.marketplace.models import JobRecord, NewJob, UserInfo
from fasttruck.models.job import JobStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/jobs", response_model=List[JobRecord])
def list_open_jobs(
    q: Optional[str] = None,
    current_user: UserInfo = Depends(get_current_user),
    backend: MarketplaceBackend = Depends(get_backend),
):
    """Open jobs, newest first"""
    jobs = backend.list_jobs(status=JobStatus.OPEN)
    if q:
        term = q.lower()
        jobs = [j for j in jobs if term in j.title.lower() or term in j.description.lower()]
    return jobs


@router.get("/jobs/mine", response_model=List[JobRecord])
def list_my_jobs(
    current_user: UserInfo = Depends(get_current_user),
    backend: MarketplaceBackend = Depends(get_backend),
):
    """Jobs posted by the current user, newest first"""
    return backend.list_jobs(client_id=current_user.id)


@router.post("/jobs", response_model=JobRecord, status_code=status.HTTP_201_CREATED)
def post_job(
    job: NewJob,
    token: str = Depends(get_token),
    current_user: UserInfo = Depends(get_current_user),
    backend: MarketplaceBackend = Depends(get_backend),
):
    """Post a delivery job as the current client"""
    try:
        created = backend.insert_job(token, job)
    except BackendError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    logger.info(f"Job {created.id} posted by user={current_user.id}")
    return created
