"""Security utilities."""

from .jwt import SessionClaims, TokenService, get_token_service
from .password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "SessionClaims",
    "TokenService",
    "get_token_service",
]
