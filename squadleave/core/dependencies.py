"""Authentication dependencies."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from squadleave.core.security import decode_token
from squadleave.schemas.auth import TokenData
from squadleave.services.access_policy import AccessPolicy

# Reads the bearer token from the Authorization header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def get_access_policy() -> AccessPolicy:
    """
    Dependency providing the credential check.

    Tests override it through app.dependency_overrides.
    """
    return AccessPolicy.from_settings()


async def get_current_user(token: str = Depends(oauth2_scheme)) -> TokenData:
    """
    Resolves the manager behind a bearer token.

    Args:
        token: JWT from the Authorization header

    Returns:
        Data of the logged-in manager

    Raises:
        HTTPException: If the token is invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token_data = decode_token(token)
    if token_data is None:
        raise credentials_exception

    email = token_data.get("sub")
    if not email:
        raise credentials_exception

    return TokenData(email=email)
