"""FastAPI dependency — bearer token authentication."""

import uuid
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from accounts.application.services.auth_service import subject_from_token
from accounts.core.exceptions import UnauthorizedException

security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> uuid.UUID:
    """Extract the caller's user id from the bearer token."""
    if credentials is None:
        raise UnauthorizedException("Missing bearer token")

    user_id = subject_from_token(credentials.credentials)
    if user_id is None:
        raise UnauthorizedException("Invalid or expired token")

    return user_id
