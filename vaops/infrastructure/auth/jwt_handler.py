"""
JWT token handler for Supabase authentication.
Validates access tokens and extracts the VA's user id.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt as jose_jwt

from vaops.domain.models.base import ValidationError


class JWTHandler:
    """Handles JWT token validation and user extraction."""

    def __init__(self, jwt_secret: Optional[str], jwt_algorithm: str = "HS256"):
        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm

    @property
    def enabled(self) -> bool:
        return bool(self.jwt_secret)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a Supabase JWT token.

        Raises:
            ValidationError: If the token is invalid, expired or has no subject
        """
        if not self.enabled:
            raise ValidationError("JWT secret is not configured")

        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise ValidationError(f"Invalid JWT token: {str(e)}")

        if not payload.get('sub'):
            raise ValidationError("Token missing user ID (sub claim)")

        return payload

    def get_user_id(self, token: str) -> str:
        """Extract user ID from JWT token."""
        payload = self.verify_token(token)
        return payload['sub']

    def generate_token(self, user_id: str, expires_minutes: int = 60) -> str:
        """Issue a token signed with the configured secret (tests and local tooling)."""
        if not self.enabled:
            raise ValidationError("JWT secret is not configured")

        now = datetime.utcnow()
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
            "aud": "authenticated",
            "iss": "supabase"
        }
        return jose_jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)
