from pydantic import BaseModel, EmailStr


class SignInRequest(BaseModel):
    """Request model for email/password sign-in"""
    email: EmailStr
    password: str


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str
