"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_identity, require_role

__all__ = ["JWTBearer", "get_current_identity", "require_role"]
