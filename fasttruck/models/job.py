import uuid
from datetime import date, datetime, timezone
from sqlalchemy import String, Text, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from fasttruck.models import Base


class JobStatus:
    """Job status constants."""
    OPEN = "open"
    CLOSED = "closed"


class Job(Base):
    """Delivery job posted by a client."""
    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )

    client_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    budget: Mapped[float] = mapped_column(Float, nullable=False)
    deadline: Mapped[date] = mapped_column(Date, nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=JobStatus.OPEN
    )

    pickup_address: Mapped[str] = mapped_column(Text, nullable=True)
    dropoff_address: Mapped[str] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<Job(id='{self.id}', title='{self.title}', status='{self.status}')>"
