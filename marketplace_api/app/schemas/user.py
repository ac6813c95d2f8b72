"""
Pydantic models for user data.

``UserCreate`` is the registration payload, ``User`` the stored
entity and ``UserPublic`` what the API returns (everything except
the password).  ``UserUpdate`` enumerates the profile fields a user
may change; rating, wallet balance, completed jobs and verification
are maintained by the store and cannot be set through it.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from .common import CamelModel, Money, UpdateModel


class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["sarah_k"])
    email: str = Field(..., examples=["sarah@example.com"])
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., examples=["Sarah"])
    last_name: str = Field(..., examples=["Kamara"])
    phone: str = Field(..., examples=["+23276123456"])
    profile_image: Optional[str] = None
    location: Optional[str] = Field(None, examples=["Freetown, Western Area"])
    skills: List[str] = Field(default_factory=list)

    @field_validator("email")
    def validate_email(cls, v: str) -> str:
        """Require a minimal ``local@domain`` shape."""
        v = v.strip()
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("Invalid email address")
        return v


class UserLogin(CamelModel):
    email: str
    password: str = Field(..., min_length=1)


class UserPublic(CamelModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    phone: str
    profile_image: Optional[str] = None
    is_verified: bool = False
    rating: Money = "0.00"
    completed_jobs: int = Field(0, ge=0)
    wallet_balance: Money = "0.00"
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)


class User(UserPublic):
    """Stored user row.  Passwords are kept in plain text (mock auth)."""

    password: str

    def public(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password"}))


class UserUpdate(UpdateModel):
    """Profile fields a user may change.  Omitted fields stay unchanged."""

    nullable_fields = ("profile_image", "location")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[List[str]] = None


class AuthResponse(CamelModel):
    user: UserPublic
