"""Authentication routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from squadleave.api.dependencies import CurrentUser, Policy
from squadleave.core.security import create_access_token
from squadleave.schemas.auth import LoginRequest, Token, TokenData
from squadleave.services.access_policy import AccessPolicy
from squadleave.shared.exceptions import AuthenticationError

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(policy: AccessPolicy, email: str, password: str) -> Token:
    try:
        actor = policy.login(email, password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token({"sub": actor}))


@router.post("/login", response_model=Token)
async def login(credentials: LoginRequest, policy: Policy):
    """
    Log in with a whitelisted e-mail and password.

    Returns a bearer token required by every write endpoint.
    """
    return _issue_token(policy, credentials.email, credentials.password)


@router.post("/token", response_model=Token)
async def token(policy: Policy, form_data: OAuth2PasswordRequestForm = Depends()):
    """OAuth2 password flow used by the interactive docs; username is the e-mail."""
    return _issue_token(policy, form_data.username, form_data.password)


@router.get("/me", response_model=TokenData)
async def me(current_user: CurrentUser):
    """Currently logged-in manager."""
    return current_user
