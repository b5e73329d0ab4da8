# src/gitter/schemas/post.py
"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PostOut(BaseModel):
    """Post record handed to the feed template."""

    id: int
    page: int = Field(..., description="Logical sequence number")
    content: str
    created: int = Field(..., description="Unix seconds at insert")

    model_config = ConfigDict(from_attributes=True)
