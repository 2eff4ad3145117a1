# Tenant (organization) model
from enum import Enum
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .note import Note
    from .user import User


class TenantPlan(str, Enum):
    """Subscription tiers."""

    FREE = "free"
    PRO = "pro"


class Tenant(BaseModel):
    """An isolated organization. Owns users and notes."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    plan: Mapped[str] = mapped_column(String(10), default=TenantPlan.FREE.value, nullable=False)

    # number of notes currently owned; moved only together with note insert/delete
    note_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    users: Mapped[List["User"]] = relationship(
        "User", back_populates="tenant", cascade="all, delete-orphan"
    )
    notes: Mapped[List["Note"]] = relationship(
        "Note", back_populates="tenant", cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint("plan IN ('free', 'pro')", name="ck_tenants_plan"),
        CheckConstraint("note_count >= 0", name="ck_tenants_note_count"),
        Index("idx_tenants_slug", "slug"),
    )

    def __repr__(self) -> str:
        return f"<Tenant(slug='{self.slug}', plan='{self.plan}')>"

    @property
    def is_pro(self) -> bool:
        return self.plan == TenantPlan.PRO
