"""OAuth sign-in schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from voicehub_identity.domain.account import Account


class OAuthCallbackRequest(BaseModel):
    """Authorization code handed back to the frontend callback page.

    Both fields are optional here so that missing values are reported as
    ``InvalidInput`` by the sign-in flow itself.
    """

    code: str | None = Field(default=None, description="Provider authorization code")
    role: str | None = Field(default=None, description="Requested role")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"code": "4/0AX4XfWh...", "role": "reviewer"},
        },
    )


class AuthorizationUrlResponse(BaseModel):
    """Provider consent URL to redirect the browser to."""

    authorization_url: str
    state: str


class UserResponse(BaseModel):
    """Response schema for account data."""

    id: UUID
    email: str
    role: str
    status: str
    profile_complete: bool
    name: str | None = None
    age: str | None = None
    gender: str | None = None
    languages: list[str] | None = None
    location: str | None = None
    constituency: str | None = None
    educational_background: str | None = None
    employment_status: str | None = None
    phone_number: str | None = None
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime | None = None
    is_active: bool

    @classmethod
    def from_account(cls, account: Account) -> "UserResponse":
        profile = account.profile
        return cls(
            id=account.id,
            email=account.email,
            role=account.role.value,
            status=account.status.value,
            profile_complete=account.profile_complete,
            name=account.name,
            age=profile.age,
            gender=profile.gender,
            languages=list(profile.languages) if profile.languages else None,
            location=profile.location,
            constituency=profile.constituency,
            educational_background=profile.educational_background,
            employment_status=profile.employment_status,
            phone_number=profile.phone_number,
            created_at=account.created_at,
            updated_at=account.updated_at,
            last_login_at=account.last_login_at,
            is_active=account.is_active,
        )


class AuthResultResponse(BaseModel):
    """Response schema for a successful OAuth sign-in."""

    success: bool = Field(default=True)
    is_new_user: bool = Field(..., serialization_alias="isNewUser")
    user: UserResponse

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "isNewUser": True,
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "email": "x@y.com",
                    "role": "reviewer",
                    "status": "pending",
                    "profile_complete": False,
                    "name": "X Y",
                    "created_at": "2025-01-05T10:30:00Z",
                    "updated_at": "2025-01-05T10:30:00Z",
                    "last_login_at": None,
                    "is_active": True,
                },
            },
        },
    )
