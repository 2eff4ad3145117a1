"""
Note management schemas.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    details: str = Field(default="", description="Note body")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if len(v.strip()) == 0:
            raise ValueError("Title cannot be empty")
        return v.strip()

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Standup", "details": "Ship the upgrade flow"}}
    )


class NoteUpdate(BaseModel):
    """Note update request schema. Omitted fields are left alone."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    details: Optional[str] = Field(default=None)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if v is not None and len(v.strip()) == 0:
            raise ValueError("Title cannot be empty")
        return v.strip() if v is not None else v


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID
    title: str
    details: str
    tenant_id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteDeleteResponse(BaseModel):
    ok: bool = True
