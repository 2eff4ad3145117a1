"""Tenant schemas."""

from pydantic import BaseModel


class TenantSummary(BaseModel):
    slug: str
    plan: str


class UpgradeResponse(BaseModel):
    """Result of a plan upgrade."""

    success: bool = True
    tenant: TenantSummary
