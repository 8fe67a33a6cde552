"""
Authentication infrastructure module.
Handles JWT validation and resolves the authenticated VA.
"""

from .jwt_handler import JWTHandler
from .supabase_auth import SupabaseIdentityService
from .dependencies import get_current_user_id, get_identity_service

__all__ = [
    "JWTHandler",
    "SupabaseIdentityService",
    "get_current_user_id",
    "get_identity_service",
]
