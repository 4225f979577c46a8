import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from fasttruck.models import Base


class ProfileRole:
    """Marketplace role constants."""
    CLIENT = "client"
    FREELANCER = "freelancer"

    ALL = (CLIENT, FREELANCER)


class Profile(Base):
    """
    Account + profile for a marketplace user.

    - id is a UUID string (matches the hosted backend's auth user id)
    - email is stored lower-cased and unique
    - role decides which dashboard the user lands on
    """
    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True
    )

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=ProfileRole.CLIENT)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<Profile(id='{self.id}', email='{self.email}', role='{self.role}')>"
