"""Searchable command record model."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


def generate_record_id() -> str:
    """Generate an opaque record identifier."""
    return uuid4().hex


class Record(BaseModel):
    """A saved command with the four text fields the engine searches."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_record_id, description="Opaque record identifier")
    name: str = Field(..., min_length=1, description="Display name of the command")
    value: str = Field(..., min_length=1, description="The command text itself")
    description: str = Field(default="", description="Free-text description")
    tags: List[str] = Field(default_factory=list, description="Curated tags")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    @field_validator("name", "value", mode="before")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Trim name and command text so blank values are rejected."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Optional[str]) -> str:
        """Treat a missing description as empty."""
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v: Optional[List[str]]) -> List[str]:
        """Treat missing tags as empty and drop blank entries."""
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        return [tag.strip() for tag in v if isinstance(tag, str) and tag.strip()]
