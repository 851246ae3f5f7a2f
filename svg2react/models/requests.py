"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    component_name: str = Field(..., description="Name of the generated component")
    strict: bool = Field(
        default=False,
        description="Reject empty/invalid input instead of returning warnings",
    )


class NormalizeRequest(BaseModel):
    file_name: str = Field(..., description="SVG file name, e.g. icon-arrow-right.svg")
