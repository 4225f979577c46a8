"""
Marketplace backend capability and its records.
"""

from fasttruck.marketplace.base import BackendError, MarketplaceBackend
from fasttruck.marketplace.models import (
    ApplicationRecord,
    AuthSession,
    JobRecord,
    NewApplication,
    NewJob,
    SignUpData,
    UserInfo,
)

__all__ = [
    "ApplicationRecord",
    "AuthSession",
    "BackendError",
    "JobRecord",
    "MarketplaceBackend",
    "NewApplication",
    "NewJob",
    "SignUpData",
    "UserInfo",
]
