"""Profile database service layer"""
from typing import Optional
from sqlalchemy.orm import Session
from fasttruck.models.profile import Profile


def get_profile_by_email(db: Session, email: str) -> Optional[Profile]:
    """
    Get profile by email address.

    Args:
        db: Database session
        email: User's email address (case-insensitive)

    Returns:
        Profile object if found, None otherwise
    """
    return db.query(Profile).filter(Profile.email == email.strip().lower()).first()


def get_profile_by_id(db: Session, profile_id: str) -> Optional[Profile]:
    """
    Get profile by id.

    Args:
        db: Database session
        profile_id: Profile UUID string

    Returns:
        Profile object if found, None otherwise
    """
    return db.query(Profile).filter(Profile.id == profile_id).first()


def create_profile(
    db: Session,
    email: str,
    password_hash: str,
    first_name: str,
    last_name: str,
    role: str,
) -> Profile:
    """
    Create a new profile record.

    Args:
        db: Database session
        email: User's email address
        password_hash: Already-hashed password
        first_name: First name
        last_name: Last name
        role: "client" or "freelancer"

    Returns:
        Created Profile object

    Raises:
        IntegrityError: If a profile with this email already exists
    """
    profile = Profile(
        email=email.strip().lower(),
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        role=role,
    )

    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile
