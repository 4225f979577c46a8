from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from fasttruck.api.dependencies import get_backend
from fasttruck.marketplace.base import MarketplaceBackend
from fasttruck.marketplace.models import UserInfo

security = HTTPBearer()


async def get_token(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> str:
    """Raw bearer token from the Authorization header"""
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_token),
    backend: MarketplaceBackend = Depends(get_backend),
) -> UserInfo:
    """
    Dependency to get current authenticated user from the session token

    Usage in route:
        @router.get("/jobs/mine")
        def my_jobs(current_user: UserInfo = Depends(get_current_user)):
            ...

    Raises:
        HTTPException: If token is invalid, expired or signed out
    """
    user = backend.get_current_user(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
