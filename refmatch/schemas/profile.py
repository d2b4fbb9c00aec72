"""Profile-related Pydantic schemas."""

from typing import Annotated, Literal

from pydantic import AfterValidator, Field, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from refmatch.schemas.base import CamelModel

RelationshipStatus = Literal["single", "not-single"]

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    """Reject anything that is not an http(s) URL but keep the string as sent."""
    try:
        _http_url.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError("Invalid url") from exc
    return value


PhotoUrl = Annotated[str, AfterValidator(_check_url)]


class PublicProfile(CamelModel):
    """What other users may see. Email and credentials are never exposed."""
    id: str
    name: str
    relationship_status: RelationshipStatus
    photo: str | None = None
    bio: str | None = None
    age: int | None = None


class ProfileUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    relationship_status: RelationshipStatus | None = None
    photo: PhotoUrl | None = None
    bio: str | None = Field(default=None, max_length=500)
    age: int | None = Field(default=None, ge=18, le=120)


class ProfileList(CamelModel):
    items: list[PublicProfile]
