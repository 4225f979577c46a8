"""
Marketplace backend capability.

Every page that needs persistence or auth receives a MarketplaceBackend
explicitly; nothing reaches for a module-level client. The operations are
the narrow set the pages actually use: session sign-in/sign-up/sign-out,
current user lookup, and list/insert for jobs and applications.
"""

from typing import List, Optional, Protocol

from fasttruck.marketplace.models import (
    ApplicationRecord,
    AuthSession,
    JobRecord,
    NewApplication,
    NewJob,
    SignUpData,
    UserInfo,
)


class BackendError(Exception):
    """
    Failure reported by the backend.

    `message` is user-facing (shown as an error notice by the pages).
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MarketplaceBackend(Protocol):
    """Operations the marketplace pages depend on."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        ...

    def sign_up(self, data: SignUpData) -> UserInfo:
        ...

    def sign_out(self, token: str) -> None:
        ...

    def get_current_user(self, token: str) -> Optional[UserInfo]:
        ...

    def list_jobs(
        self,
        *,
        client_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[JobRecord]:
        ...

    def insert_job(self, token: str, job: NewJob) -> JobRecord:
        ...

    def list_applications(
        self,
        *,
        freelancer_id: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> List[ApplicationRecord]:
        ...

    def insert_application(self, token: str, application: NewApplication) -> ApplicationRecord:
        ...
