"""Pydantic DTOs (Data Transfer Objects) for the Link feature."""

from datetime import datetime
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

MAX_URL_LENGTH = 2048


class LinkCreate(BaseModel):
    """Schema for creating a new link. Also used for full updates."""

    url: str = Field(..., min_length=1, max_length=MAX_URL_LENGTH, examples=["https://example.com"])
    title: str = Field(..., min_length=1, max_length=255, examples=["Example"])
    description: str = Field(..., min_length=1, max_length=1000, examples=["An example site"])

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        value = value.strip()
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("URL must be an absolute http(s) URL")
        return value


class LinkUpdate(LinkCreate):
    """Schema for updating a link — url, title and description are replaced."""


class LinkPreviewResponse(BaseModel):
    title: str | None = None
    description: str | None = None
    image_url: str | None = None

    model_config = {"from_attributes": True}


class OwnerSummaryResponse(BaseModel):
    username: str

    model_config = {"from_attributes": True}


class LinkResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    url: str
    title: str
    description: str
    owner_id: str
    click_count: int
    created_at: datetime
    updated_at: datetime
    preview: LinkPreviewResponse | None = None
    owner: OwnerSummaryResponse | None = None

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Acknowledgement body for operations without a resource payload."""

    message: str
