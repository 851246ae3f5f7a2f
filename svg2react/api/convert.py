"""POST /api/convert/* and /api/normalize — SVG to component conversion."""

from __future__ import annotations

import asyncio
import functools
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from svg2react.config import Settings
from svg2react.convert.batch import BatchFailure, convert_batch
from svg2react.convert.naming import normalize
from svg2react.convert.transformer import ConversionResult, convert
from svg2react.convert.validation import is_valid_component_name, validate_component_name
from svg2react.dependencies import get_settings
from svg2react.errors import ConversionError
from svg2react.models.requests import ConvertRequest, NormalizeRequest
from svg2react.models.responses import (
    BatchConvertResponse,
    BatchFailureResponse,
    ConvertedFileResponse,
    ConvertResponse,
    NormalizeResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _run_convert(req: ConvertRequest) -> ConversionResult:
    try:
        return convert(req.svg, req.component_name, strict=req.strict)
    except ConversionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_name(req: NormalizeRequest) -> NormalizeResponse:
    name = normalize(req.file_name)
    return NormalizeResponse(
        file_name=req.file_name,
        component_name=name,
        valid=is_valid_component_name(name),
    )


@router.post("/convert", response_model=ConvertResponse)
async def convert_svg(req: ConvertRequest) -> ConvertResponse:
    result = _run_convert(req)
    return ConvertResponse(
        component_name=result.component_name,
        code=result.code,
        warnings=list(result.warnings),
    )


@router.post("/convert/download")
async def download_component(
    req: ConvertRequest,
    settings: Settings = Depends(get_settings),
) -> Response:
    # The name becomes the file name, so it has to be valid even when not strict
    valid, err = validate_component_name(req.component_name)
    if not valid:
        raise HTTPException(status_code=422, detail=err)

    result = _run_convert(req)
    filename = f"{result.component_name}.{settings.component_file_extension}"
    return Response(
        content=result.code,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/convert/batch", response_model=BatchConvertResponse)
async def convert_uploads(
    files: list[UploadFile] = File(...),
    settings: Settings = Depends(get_settings),
) -> BatchConvertResponse:
    items: list[tuple[str, bytes]] = []
    oversized: list[BatchFailure] = []

    for upload in files:
        name = upload.filename or "upload.svg"
        # One byte past the limit is enough to tell the file is too large
        data = await upload.read(settings.max_upload_bytes + 1)
        if len(data) > settings.max_upload_bytes:
            logger.warning("Skipping %s: %d bytes exceeds upload limit", name, len(data))
            oversized.append(
                BatchFailure(
                    original_name=name,
                    reason=f"File exceeds {settings.max_upload_bytes} bytes",
                )
            )
            continue
        items.append((name, data))

    # Conversion is CPU-bound; keep the event loop free
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(
        None,
        functools.partial(convert_batch, items, max_workers=settings.batch_workers),
    )
    result.failed.extend(oversized)

    return BatchConvertResponse(
        converted=[
            ConvertedFileResponse(
                original_name=c.original_name,
                component_name=c.component_name,
                code=c.code,
            )
            for c in result.converted
        ],
        failed=[
            BatchFailureResponse(original_name=f.original_name, reason=f.reason)
            for f in result.failed
        ],
        succeeded=result.succeeded,
        total=result.total,
    )
