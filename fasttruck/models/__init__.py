from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """Base class for all database models"""
    pass

# Import all models here so Base.metadata knows every table
from fasttruck.models.profile import Profile, ProfileRole
from fasttruck.models.job import Job, JobStatus
from fasttruck.models.application import Application, ApplicationStatus

__all__ = [
    "Base",
    "Profile",
    "ProfileRole",
    "Job",
    "JobStatus",
    "Application",
    "ApplicationStatus",
]
