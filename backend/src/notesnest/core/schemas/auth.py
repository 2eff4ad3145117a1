"""
Authentication schemas.

Login takes email + password and hands back a signed session token together
with a summary of who the caller is and which tenant they belong to.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(min_length=3, max_length=255, description="Account email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if "@" not in v:
            raise ValueError("Invalid email address")
        return v

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "admin@acme.test", "password": "password"}}
    )


class UserSummary(BaseModel):
    """Who the caller is. ``tenant`` is the tenant slug."""

    email: str
    role: str
    tenant: str
    plan: str


class LoginResponse(BaseModel):
    """Session token response schema."""

    token: str = Field(description="Signed session token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(description="Token lifetime in seconds")
    user: UserSummary

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 28800,
                "user": {
                    "email": "admin@acme.test",
                    "role": "admin",
                    "tenant": "acme",
                    "plan": "free",
                },
            }
        }
    )


class MeResponse(BaseModel):
    user: UserSummary
