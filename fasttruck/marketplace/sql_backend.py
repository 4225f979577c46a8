"""
SQLAlchemy-backed MarketplaceBackend.

Sessions are JWTs signed with settings.SECRET_KEY. Sign-out revokes the
token's jti in memory for the lifetime of this backend instance.
"""

import logging
from datetime import timedelta
from typing import List, Optional, Set

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from fasttruck.auth.utils import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from fasttruck.config.settings import settings
from fasttruck.db import applications_service, jobs_service, profile_service
from fasttruck.marketplace.base import BackendError
from fasttruck.marketplace.models import (
    ApplicationRecord,
    AuthSession,
    JobRecord,
    NewApplication,
    NewJob,
    SignUpData,
    UserInfo,
)
from fasttruck.models.application import Application
from fasttruck.models.job import JobStatus
from fasttruck.models.profile import Profile, ProfileRole

logger = logging.getLogger(__name__)


def _user_info(profile: Profile) -> UserInfo:
    return UserInfo(
        id=profile.id,
        email=profile.email,
        first_name=profile.first_name,
        last_name=profile.last_name,
        role=profile.role,
    )


def _application_record(application: Application) -> ApplicationRecord:
    freelancer = application.freelancer
    return ApplicationRecord(
        id=application.id,
        job_id=application.job_id,
        freelancer_id=application.freelancer_id,
        proposal=application.proposal,
        status=application.status,
        created_at=application.created_at,
        freelancer_first_name=freelancer.first_name if freelancer else None,
        freelancer_last_name=freelancer.last_name if freelancer else None,
    )


class SqlMarketplaceBackend:
    """
    MarketplaceBackend over a SQLAlchemy session factory.

    Usage:
        from fasttruck.db.session import SessionLocal

        backend = SqlMarketplaceBackend(SessionLocal)
        session = backend.sign_in("client@example.com", "secret123")
        jobs = backend.list_jobs(client_id=session.user.id)
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._revoked: Set[str] = set()

    def _session(self) -> Session:
        return self._session_factory()

    # =========================================================================
    # Auth
    # =========================================================================

    def sign_in(self, email: str, password: str) -> AuthSession:
        with self._session() as db:
            profile = profile_service.get_profile_by_email(db, email)
            if profile is None or not verify_password(password, profile.password_hash):
                raise BackendError("Invalid login credentials", status_code=401)
            user = _user_info(profile)

        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
        access_token = create_access_token(
            data={
                "sub": user.id,
                "email": user.email,
                "role": user.role,
                "first_name": user.first_name,
                "last_name": user.last_name,
            },
            expires_delta=timedelta(minutes=expires_minutes),
        )

        logger.info(f"Signed in user={user.id} role={user.role}")
        return AuthSession(
            access_token=access_token,
            expires_in=expires_minutes * 60,
            user=user,
        )

    def sign_up(self, data: SignUpData) -> UserInfo:
        with self._session() as db:
            if profile_service.get_profile_by_email(db, data.email) is not None:
                raise BackendError("User already registered")

            try:
                profile = profile_service.create_profile(
                    db,
                    email=data.email,
                    password_hash=hash_password(data.password),
                    first_name=data.first_name,
                    last_name=data.last_name,
                    role=data.role,
                )
            except IntegrityError:
                db.rollback()
                raise BackendError("User already registered")

            logger.info(f"Registered user={profile.id} role={profile.role}")
            return _user_info(profile)

    def sign_out(self, token: str) -> None:
        payload = decode_access_token(token)
        if payload and payload.get("jti"):
            self._revoked.add(payload["jti"])

    def get_current_user(self, token: str) -> Optional[UserInfo]:
        payload = decode_access_token(token)
        if payload is None or payload.get("jti") in self._revoked:
            return None

        profile_id = payload.get("sub")
        if not profile_id:
            return None

        with self._session() as db:
            profile = profile_service.get_profile_by_id(db, profile_id)
            return _user_info(profile) if profile else None

    def _require_user(self, token: str, role: str) -> UserInfo:
        user = self.get_current_user(token)
        if user is None:
            raise BackendError("Not authenticated", status_code=401)
        if user.role != role:
            raise BackendError(f"Only {role}s can do this", status_code=403)
        return user

    # =========================================================================
    # Jobs
    # =========================================================================

    def list_jobs(
        self,
        *,
        client_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[JobRecord]:
        with self._session() as db:
            jobs = jobs_service.list_jobs(db, client_id=client_id, status=status)
            return [JobRecord.model_validate(job) for job in jobs]

    def insert_job(self, token: str, job: NewJob) -> JobRecord:
        user = self._require_user(token, ProfileRole.CLIENT)

        with self._session() as db:
            created = jobs_service.create_job(
                db,
                client_id=user.id,
                title=job.title,
                description=job.description,
                budget=job.budget,
                deadline=job.deadline,
                pickup_address=job.pickup_address,
                dropoff_address=job.dropoff_address,
            )
            return JobRecord.model_validate(created)

    # =========================================================================
    # Applications
    # =========================================================================

    def list_applications(
        self,
        *,
        freelancer_id: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> List[ApplicationRecord]:
        with self._session() as db:
            applications = applications_service.list_applications(
                db, freelancer_id=freelancer_id, client_id=client_id
            )
            return [_application_record(a) for a in applications]

    def insert_application(self, token: str, application: NewApplication) -> ApplicationRecord:
        user = self._require_user(token, ProfileRole.FREELANCER)

        with self._session() as db:
            job = jobs_service.get_job_by_id(db, application.job_id)
            if job is None:
                raise BackendError("Job not found", status_code=404)
            if job.status != JobStatus.OPEN:
                raise BackendError("Job is no longer open")

            try:
                created = applications_service.create_application(
                    db,
                    job_id=job.id,
                    freelancer_id=user.id,
                    proposal=application.proposal,
                )
            except IntegrityError:
                db.rollback()
                raise BackendError("You have already applied to this job")

            return _application_record(created)
