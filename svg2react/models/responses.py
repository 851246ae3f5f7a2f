"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    rules_registered: int = 0


class NormalizeResponse(BaseModel):
    file_name: str
    component_name: str
    valid: bool


class ConvertResponse(BaseModel):
    component_name: str
    code: str
    warnings: list[str] = Field(default_factory=list)


class ConvertedFileResponse(BaseModel):
    original_name: str
    component_name: str
    code: str


class BatchFailureResponse(BaseModel):
    original_name: str
    reason: str


class BatchConvertResponse(BaseModel):
    converted: list[ConvertedFileResponse] = Field(default_factory=list)
    failed: list[BatchFailureResponse] = Field(default_factory=list)
    succeeded: int = 0
    total: int = 0
