"""Pydantic schemas for authentication."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login payload."""
    email: str = Field(..., min_length=3, max_length=255, description="Whitelisted e-mail")
    password: str = Field(..., min_length=1, description="Password")


class Token(BaseModel):
    """JWT access token response."""
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    """Data decoded from a token."""
    email: str
