"""Batch conversion of many SVG files.

Files are independent: a file that cannot be read or converted is logged
and reported as a failure, and the rest of the batch still runs.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from svg2react.convert.naming import normalize
from svg2react.convert.transformer import transform
from svg2react.convert.validation import validate_svg_source
from svg2react.errors import ConversionError, SvgReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertedFile:
    original_name: str
    component_name: str
    code: str


@dataclass(frozen=True)
class BatchFailure:
    original_name: str
    reason: str


@dataclass
class BatchResult:
    converted: list[ConvertedFile] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.converted)

    @property
    def total(self) -> int:
        return len(self.converted) + len(self.failed)


def read_svg_text(data: bytes) -> str:
    """Decode uploaded file bytes as SVG text, or raise SvgReadError."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SvgReadError(f"Not UTF-8 text: {e.reason}") from e
    valid, err = validate_svg_source(text)
    if not valid:
        raise SvgReadError(err)
    return text


def convert_file(original_name: str, data: bytes) -> ConvertedFile:
    text = read_svg_text(data)
    component_name = normalize(os.path.basename(original_name))
    return ConvertedFile(
        original_name=original_name,
        component_name=component_name,
        code=transform(text, component_name),
    )


def _convert_one(item: tuple[str, bytes]) -> ConvertedFile | BatchFailure:
    name, data = item
    try:
        return convert_file(name, data)
    except ConversionError as e:
        logger.warning("Skipping %s: %s", name, e)
        return BatchFailure(original_name=name, reason=str(e))


def convert_batch(files: Iterable[tuple[str, bytes]], max_workers: int = 1) -> BatchResult:
    """Convert ``(file_name, raw_bytes)`` pairs, keeping input order."""
    items = list(files)
    if max_workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            outcomes = list(pool.map(_convert_one, items))
    else:
        outcomes = [_convert_one(item) for item in items]

    result = BatchResult()
    for outcome in outcomes:
        if isinstance(outcome, ConvertedFile):
            result.converted.append(outcome)
        else:
            result.failed.append(outcome)

    logger.info("Batch complete: %d/%d files converted", result.succeeded, result.total)
    return result


def convert_paths(paths: Iterable[str | Path], max_workers: int = 1) -> BatchResult:
    """Read files from disk and convert them. Unreadable files are failures."""
    items: list[tuple[str, bytes]] = []
    unreadable: list[BatchFailure] = []
    for path in paths:
        path = Path(path)
        try:
            items.append((path.name, path.read_bytes()))
        except OSError as e:
            logger.warning("Skipping %s: %s", path, e)
            unreadable.append(BatchFailure(original_name=path.name, reason=str(e)))

    result = convert_batch(items, max_workers=max_workers)
    result.failed.extend(unreadable)
    return result
