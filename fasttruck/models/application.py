import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fasttruck.models import Base
from fasttruck.models.profile import Profile


class ApplicationStatus:
    """Application status constants."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Application(Base):
    """
    Freelancer application to a job.

    Unique constraint: (job_id, freelancer_id) - one application per job
    """
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "freelancer_id", name="uq_job_freelancer"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )

    job_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    freelancer_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    proposal: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ApplicationStatus.PENDING
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    freelancer: Mapped[Profile] = relationship(Profile, lazy="joined")

    def __repr__(self) -> str:
        return f"<Application(id='{self.id}', job_id='{self.job_id}', status='{self.status}')>"
