"""Pydantic schemas defining the API contracts."""

from .auth import LoginRequest, LoginResponse, MeResponse, UserSummary
from .common import ErrorResponse, HealthCheckResponse, StatusResponse
from .notes import NoteCreate, NoteDeleteResponse, NoteResponse, NoteUpdate
from .tenants import TenantSummary, UpgradeResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "UserSummary",
    "ErrorResponse",
    "HealthCheckResponse",
    "StatusResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteDeleteResponse",
    "TenantSummary",
    "UpgradeResponse",
]
