from fastapi import APIRouter, Depends, HTTPException, status

from fasttruck.api.dependencies import get_backend
from fasttruck.auth.dependencies import get_current_user, get_token
from fasttruck.auth.models import MessageResponse, SignInRequest
from fasttruck.marketplace.base import BackendError, MarketplaceBackend
from fasttruck.marketplace.models import AuthSession, SignUpData, UserInfo

router = APIRouter()


@router.post("/sign-in", response_model=AuthSession)
def sign_in(request: SignInRequest, backend: MarketplaceBackend = Depends(get_backend)):
    """
    Sign in with email and password

    Returns a bearer token to send as `Authorization: Bearer <token>`
    on subsequent requests, plus the user's profile.
    """
    try:
        return backend.sign_in(request.email, request.password)
    except BackendError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/sign-up", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
def sign_up(request: SignUpData, backend: MarketplaceBackend = Depends(get_backend)):
    """Register a client or freelancer account"""
    try:
        return backend.sign_up(request)
    except BackendError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/sign-out", response_model=MessageResponse)
def sign_out(
    token: str = Depends(get_token),
    backend: MarketplaceBackend = Depends(get_backend),
):
    """Revoke the current session token"""
    backend.sign_out(token)
    return MessageResponse(message="Signed out")


@router.get("/me", response_model=UserInfo)
def me(current_user: UserInfo = Depends(get_current_user)):
    """Current user's profile (protected endpoint)"""
    return current_user
