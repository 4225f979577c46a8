"""
Database service functions for job applications.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from fasttruck.models.application import Application, ApplicationStatus
from fasttruck.models.job import Job

logger = logging.getLogger(__name__)


def create_application(
    db: Session,
    job_id: str,
    freelancer_id: str,
    proposal: str,
) -> Application:
    """
    Insert a pending application.

    Raises:
        IntegrityError: If the freelancer already applied to this job
    """
    application = Application(
        job_id=job_id,
        freelancer_id=freelancer_id,
        proposal=proposal,
        status=ApplicationStatus.PENDING,
    )

    db.add(application)
    db.commit()
    db.refresh(application)

    logger.info(f"Created application {application.id} (job={job_id}, freelancer={freelancer_id})")
    return application


def list_applications(
    db: Session,
    freelancer_id: Optional[str] = None,
    client_id: Optional[str] = None,
) -> list[Application]:
    """
    List applications, newest first.

    Args:
        db: Database session
        freelancer_id: Only applications submitted by this freelancer
        client_id: Only applications to jobs owned by this client

    Returns:
        List of Application objects (freelancer profile eagerly loaded)
    """
    query = db.query(Application)

    if freelancer_id is not None:
        query = query.filter(Application.freelancer_id == freelancer_id)
    if client_id is not None:
        query = query.join(Job, Job.id == Application.job_id).filter(Job.client_id == client_id)

    return query.order_by(Application.created_at.desc()).all()
