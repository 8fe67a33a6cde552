"""
Authentication dependencies for FastAPI.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vaops.domain.models.base import ValidationError
from vaops.infrastructure.auth.supabase_auth import SupabaseIdentityService


# Security scheme
security = HTTPBearer()


def get_identity_service(request: Request) -> SupabaseIdentityService:
    """Dependency to get the identity service created at startup."""
    return request.app.state.identity


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    identity: Annotated[SupabaseIdentityService, Depends(get_identity_service)]
) -> str:
    """
    FastAPI dependency to get current authenticated VA ID.

    Raises:
        HTTPException: If authentication fails
    """
    try:
        return identity.get_user_id(credentials.credentials)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
