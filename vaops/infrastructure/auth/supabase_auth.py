"""
Supabase identity service.
Resolves a bearer token to the id of the authenticated VA.
"""

import logging
from typing import Optional

from supabase import create_client, Client

from vaops.config import Settings
from vaops.domain.models.base import ValidationError
from vaops.infrastructure.auth.jwt_handler import JWTHandler

logger = logging.getLogger(__name__)


class SupabaseIdentityService:
    """
    Token verification against Supabase.

    Tokens are verified locally when the JWT secret is configured; otherwise
    the Supabase auth API is asked who the token belongs to.
    """

    def __init__(self, jwt_handler: JWTHandler, supabase: Optional[Client] = None):
        self.jwt_handler = jwt_handler
        self.supabase = supabase

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseIdentityService":
        supabase = None
        if settings.supabase_url and settings.supabase_anon_key:
            supabase = create_client(settings.supabase_url, settings.supabase_anon_key)
        return cls(JWTHandler(settings.supabase_jwt_secret), supabase)

    def get_user_id(self, token: str) -> str:
        """
        Return the VA id the token was issued to.

        Raises:
            ValidationError: If the token cannot be verified
        """
        if self.jwt_handler.enabled:
            return self.jwt_handler.get_user_id(token)

        if self.supabase is None:
            raise ValidationError("Authentication is not configured")

        try:
            response = self.supabase.auth.get_user(token)
        except Exception as e:
            logger.warning(f"Supabase rejected access token: {e}")
            raise ValidationError(f"Invalid access token: {str(e)}")

        if response is None or response.user is None:
            raise ValidationError("Invalid access token")

        return response.user.id
