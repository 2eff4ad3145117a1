"""
Database models for NotesNest.

Three collections make up the schema:
    - Tenant: an isolated organization with a slug and a plan
    - User: an account belonging to exactly one tenant, with a role
    - Note: tenant-owned content, optionally attributed to its author
"""

from .base import BaseModel
from .note import Note
from .tenant import Tenant, TenantPlan
from .user import User, UserRole

__all__ = [
    "BaseModel",
    "Tenant",
    "TenantPlan",
    "User",
    "UserRole",
    "Note",
]
