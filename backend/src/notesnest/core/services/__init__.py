"""
Service layer interfaces and implementations.
"""

from .auth_service import AuthService
from .health_service import HealthService
from .interfaces import IAuthService, IHealthService, INoteService, IQuotaPolicy, ITenantService
from .note_service import NoteService
from .quota_policy import FREE_PLAN_NOTE_LIMIT, QuotaPolicy
from .tenant_service import TenantService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "IQuotaPolicy",
    "ITenantService",
    "IHealthService",
    # Implementations
    "AuthService",
    "NoteService",
    "QuotaPolicy",
    "TenantService",
    "HealthService",
    "FREE_PLAN_NOTE_LIMIT",
]
