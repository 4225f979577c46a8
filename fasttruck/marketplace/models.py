"""
Pydantic records exchanged with a MarketplaceBackend.

Records are plain data: dashboards, forms and API routes only ever see these,
never ORM objects.
"""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["client", "freelancer"]


class UserInfo(BaseModel):
    """Signed-in user as seen by the front-end"""
    id: str
    email: EmailStr
    first_name: str
    last_name: str
    role: Role

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class AuthSession(BaseModel):
    """Session returned by a successful sign-in"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserInfo


class SignUpData(BaseModel):
    """Registration payload"""
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    role: Role = "client"


class NewJob(BaseModel):
    """Fields a client supplies when posting a job"""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    budget: float = Field(gt=0)
    deadline: date
    pickup_address: Optional[str] = None
    dropoff_address: Optional[str] = None


class JobRecord(BaseModel):
    """Stored job"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    title: str
    description: str
    budget: float
    deadline: date
    status: str
    pickup_address: Optional[str] = None
    dropoff_address: Optional[str] = None
    created_at: datetime


class NewApplication(BaseModel):
    """Fields a freelancer supplies when applying"""
    job_id: str
    proposal: str = Field(min_length=1)


class ApplicationRecord(BaseModel):
    """Stored application, with the applicant's name for client listings"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    job_id: str
    freelancer_id: str
    proposal: str
    status: str
    created_at: datetime
    freelancer_first_name: Optional[str] = None
    freelancer_last_name: Optional[str] = None
