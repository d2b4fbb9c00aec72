"""Auth-related Pydantic schemas."""

from pydantic import EmailStr, Field

from refmatch.schemas.base import CamelModel
from refmatch.schemas.profile import PublicProfile, RelationshipStatus


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    relationship_status: RelationshipStatus | None = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(CamelModel):
    user: PublicProfile
    token: str
