"""Pydantic schemas for API responses."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ListOptionResponse(BaseModel):
    """Selectable option schema."""

    name: str = Field(..., description="Label shown to the user")
    value: str = Field(..., description="Value submitted when selected")


class ListOptionsResponse(BaseModel):
    """List of selectable options."""

    options: List[ListOptionResponse] = Field(default_factory=list)


class DescriptorResponse(BaseModel):
    """Build wrapper descriptor schema."""

    model_config = ConfigDict(populate_by_name=True)

    display_name: str = Field(..., alias="displayName", description="Name shown in the build configuration")
    applicable: bool = Field(..., description="Whether the wrapper can be used with projects")


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Error details")
