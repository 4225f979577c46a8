"""
Database service functions for job records.

Create and list only; jobs are never edited once posted.
"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from fasttruck.models.job import Job, JobStatus

logger = logging.getLogger(__name__)


def create_job(
    db: Session,
    client_id: str,
    title: str,
    description: str,
    budget: float,
    deadline: date,
    pickup_address: Optional[str] = None,
    dropoff_address: Optional[str] = None,
) -> Job:
    """
    Insert a new open job for a client.

    Args:
        db: Database session
        client_id: Profile id of the posting client
        title: Job title
        description: Load description
        budget: Offered budget
        deadline: Delivery deadline
        pickup_address: Pickup address (usually resolved from a pincode)
        dropoff_address: Drop-off address (usually resolved from a pincode)

    Returns:
        Created Job object
    """
    job = Job(
        client_id=client_id,
        title=title,
        description=description,
        budget=budget,
        deadline=deadline,
        status=JobStatus.OPEN,
        pickup_address=pickup_address,
        dropoff_address=dropoff_address,
    )

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"Created job {job.id} for client={client_id}")
    return job


def get_job_by_id(db: Session, job_id: str) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()


def list_jobs(
    db: Session,
    client_id: Optional[str] = None,
    status: Optional[str] = None,
) -> list[Job]:
    """
    List jobs, newest first.

    Args:
        db: Database session
        client_id: Only jobs posted by this client (optional)
        status: Only jobs with this status (optional)

    Returns:
        List of Job objects ordered by created_at descending
    """
    query = db.query(Job)

    if client_id is not None:
        query = query.filter(Job.client_id == client_id)
    if status is not None:
        query = query.filter(Job.status == status)

    return query.order_by(Job.created_at.desc()).all()
