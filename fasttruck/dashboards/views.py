"""Dashboard view-models. Both talk only to the MarketplaceBackend they are handed."""

from dataclasses import dataclass
from typing import List, Union

from fasttruck.forms import ApplicationForm, FormValidationError, JobPostForm
from fasttruck.marketplace.base import BackendError, MarketplaceBackend
from fasttruck.marketplace.models import ApplicationRecord, JobRecord, UserInfo
from fasttruck.models.job import JobStatus
from fasttruck.utils.log_context import ComponentType, DashboardLogContext


@dataclass
class Notice:
    """User-facing outcome of a submit action (rendered as a toast)."""
    title: str
    description: str
    error: bool = False

    @classmethod
    def failure(cls, description: str) -> "Notice":
        return cls(title="Error", description=description, error=True)


class _Dashboard:
    component_type: ComponentType

    def __init__(self, backend: MarketplaceBackend, token: str, user: UserInfo):
        self.backend = backend
        self.token = token
        self.user = user
        self.jobs: List[JobRecord] = []
        self.loading = True
        self._log = DashboardLogContext(self.component_type, user.id)

    def logout(self) -> None:
        self.backend.sign_out(self.token)
        self._log.log_info("Signed out")


class ClientDashboard(_Dashboard):
    """Jobs the client posted and the applications they received."""

    component_type = ComponentType.CLIENT_DASHBOARD

    def __init__(self, backend: MarketplaceBackend, token: str, user: UserInfo):
        super().__init__(backend, token, user)
        self.applications: List[ApplicationRecord] = []

    def fetch_jobs(self) -> List[JobRecord]:
        try:
            self.jobs = self.backend.list_jobs(client_id=self.user.id)
        except BackendError as e:
            self._log.log_error(f"Error fetching jobs: {e.message}")
        finally:
            self.loading = False
        return self.jobs

    def fetch_applications(self) -> List[ApplicationRecord]:
        try:
            self.applications = self.backend.list_applications(client_id=self.user.id)
        except BackendError as e:
            self._log.log_error(f"Error fetching applications: {e.message}")
        return self.applications

    def applications_for(self, job_id: str) -> List[ApplicationRecord]:
        return [a for a in self.applications if a.job_id == job_id]

    def post_job(self, form: JobPostForm) -> Notice:
        """Submit the form; on success the form is cleared and jobs are refetched."""
        try:
            new_job = form.validate()
            created = self.backend.insert_job(self.token, new_job)
        except FormValidationError as e:
            return Notice.failure(str(e))
        except BackendError as e:
            return Notice.failure(e.message)

        self._log.log_info(f"Posted job {created.id}")
        form.reset()
        self.fetch_jobs()
        return Notice(
            title="Job posted successfully!",
            description="Freelancers can now apply to your job.",
        )


class FreelancerDashboard(_Dashboard):
    """Open jobs to browse, plus the freelancer's own applications."""

    component_type = ComponentType.FREELANCER_DASHBOARD

    def __init__(self, backend: MarketplaceBackend, token: str, user: UserInfo):
        super().__init__(backend, token, user)
        self.my_applications: List[ApplicationRecord] = []

    def fetch_jobs(self) -> List[JobRecord]:
        try:
            self.jobs = self.backend.list_jobs(status=JobStatus.OPEN)
        except BackendError as e:
            self._log.log_error(f"Error fetching jobs: {e.message}")
        finally:
            self.loading = False
        return self.jobs

    def fetch_my_applications(self) -> List[ApplicationRecord]:
        try:
            self.my_applications = self.backend.list_applications(freelancer_id=self.user.id)
        except BackendError as e:
            self._log.log_error(f"Error fetching applications: {e.message}")
        return self.my_applications

    def has_applied(self, job_id: str) -> bool:
        return any(a.job_id == job_id for a in self.my_applications)

    def filtered_jobs(self, search_term: str = "") -> List[JobRecord]:
        """Case-insensitive substring match on title or description."""
        term = search_term.lower()
        return [
            job for job in self.jobs
            if term in job.title.lower() or term in job.description.lower()
        ]

    def apply(self, form: ApplicationForm) -> Notice:
        try:
            new_application = form.validate()
            created = self.backend.insert_application(self.token, new_application)
        except FormValidationError as e:
            return Notice.failure(str(e))
        except BackendError as e:
            return Notice.failure(e.message)

        self._log.log_info(f"Applied to job {created.job_id}")
        form.reset()
        self.fetch_my_applications()
        return Notice(
            title="Application submitted!",
            description="Good luck! The client will review your proposal.",
        )


Dashboard = Union[ClientDashboard, FreelancerDashboard]


def dashboard_for(backend: MarketplaceBackend, token: str) -> Dashboard:
    """
    Open the dashboard matching the signed-in user's role.

    Raises:
        BackendError: If the token does not belong to a signed-in user
    """
    user = backend.get_current_user(token)
    if user is None:
        raise BackendError("Not authenticated", status_code=401)

    if user.role == "freelancer":
        return FreelancerDashboard(backend, token, user)
    return ClientDashboard(backend, token, user)
