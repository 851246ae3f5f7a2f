"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svg2react import __version__
from svg2react.convert.rules import DEFAULT_RULES
from svg2react.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        rules_registered=len(DEFAULT_RULES),
    )
