"""
API routes for job applications.

Endpoints:
- GET  /api/applications   Freelancer: own applications. Client: applications to own jobs.
- POST /api/applications   Apply to an open job (freelancers only)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from fasttruck.api.dependencies import get_backend
from fasttruck.auth.dependencies import get_current_user, get_token
from fasttruck.marketplace.base import BackendError, MarketplaceBackend
from fasttruck.marketplace.models import ApplicationRecord, NewApplication, UserInfo
from fasttruck.models.profile import ProfileRole

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/applications", response_model=List[ApplicationRecord])
def list_applications(
    current_user: UserInfo = Depends(get_current_user),
    backend: MarketplaceBackend = Depends(get_backend),
):
    if current_user.role == ProfileRole.FREELANCER:
        return backend.list_applications(freelancer_id=current_user.id)
    return backend.list_applications(client_id=current_user.id)


@router.post("/applications", response_model=ApplicationRecord, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    application: NewApplication,
    token: str = Depends(get_token),
    current_user: UserInfo = Depends(get_current_user),
    backend: MarketplaceBackend = Depends(get_backend),
):
    """Submit a proposal for an open job"""
    try:
        created = backend.insert_application(token, application)
    except BackendError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    logger.info(f"Application {created.id} to job={created.job_id} by user={current_user.id}")
    return created
