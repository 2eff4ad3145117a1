"""
User model for authentication.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .tenant import Tenant


class UserRole(str, Enum):
    """Roles within a tenant."""

    ADMIN = "admin"
    MEMBER = "member"


class User(BaseModel):
    """User account, bound to one tenant for its lifetime."""

    __tablename__ = "users"

    # unique across the whole system, not per tenant
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.MEMBER.value, nullable=False)

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="users", lazy="selectin")

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'member')", name="ck_users_role"),
        Index("idx_users_email", "email"),
        Index("idx_users_tenant_id", "tenant_id"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}', role='{self.role}')>"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
