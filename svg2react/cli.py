"""svg2react command line tool.

Usage:
    svg2react icon-arrow-right.svg                 # print component to stdout
    svg2react icon.svg -n ArrowIcon -o src/icons   # write src/icons/ArrowIcon.tsx
    svg2react icons/ -o src/icons                  # batch: every *.svg in the folder
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from svg2react.config import settings
from svg2react.convert.batch import convert_paths
from svg2react.convert.naming import normalize
from svg2react.convert.transformer import convert
from svg2react.errors import ConversionError


def _output_path(output: str, component_name: str) -> Path:
    out = Path(output)
    if out.is_dir() or not out.suffix:
        out.mkdir(parents=True, exist_ok=True)
        return out / f"{component_name}.{settings.component_file_extension}"
    out.parent.mkdir(parents=True, exist_ok=True)
    return out


def convert_single(input_path: str, name: str | None, output: str | None, strict: bool) -> bool:
    """Convert one file. Returns True on success."""
    try:
        svg_text = Path(input_path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        print(f"  Failed to read {input_path}: {e}", file=sys.stderr)
        return False

    component_name = name or normalize(os.path.basename(input_path))
    try:
        result = convert(svg_text, component_name, strict=strict)
    except ConversionError as e:
        print(f"  {e}", file=sys.stderr)
        return False

    for warning in result.warnings:
        print(f"  warning: {warning}", file=sys.stderr)

    if output:
        out_path = _output_path(output, component_name)
        out_path.write_text(result.code + "\n", encoding="utf-8")
        print(f"  → Saved: {out_path}")
    else:
        print(result.code)
    return True


def convert_folder(input_dir: str, output: str | None, jobs: int) -> None:
    """Convert every .svg in *input_dir* into *output*, one file per component."""
    svg_files = sorted(p for p in Path(input_dir).iterdir() if p.suffix.lower() == ".svg")
    if not svg_files:
        print("No .svg files found in folder.")
        sys.exit(1)

    out_dir = Path(output or input_dir.rstrip("/\\") + "_components")
    out_dir.mkdir(parents=True, exist_ok=True)

    print(f"Processing {len(svg_files)} files...\n")
    result = convert_paths(svg_files, max_workers=jobs)

    written: dict[str, str] = {}  # component name -> original file name
    for converted in result.converted:
        if converted.component_name in written:
            first = written[converted.component_name]
            print(f"[{converted.original_name}] skipped: duplicate component name {converted.component_name} (already from {first})")
            continue
        written[converted.component_name] = converted.original_name
        out_path = out_dir / f"{converted.component_name}.{settings.component_file_extension}"
        out_path.write_text(converted.code + "\n", encoding="utf-8")
        print(f"[{converted.original_name}] → {out_path}")
    for failure in result.failed:
        print(f"[{failure.original_name}] skipped: {failure.reason}")

    print(f"\nDone: {len(written)}/{result.total} converted → {out_dir}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="SVG → React component converter")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-n", "--name", help="Component name (single file only; default: from file name)")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("-j", "--jobs", type=int, default=settings.batch_workers, help="Worker threads for folders")
    parser.add_argument("--strict", action="store_true", help="Fail on empty input or invalid component names")
    parser.add_argument("--log-level", default=settings.svg2react_log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if os.path.isdir(args.input):
        convert_folder(args.input, args.output, args.jobs)
        return

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        sys.exit(1)

    if not convert_single(args.input, args.name, args.output, args.strict):
        sys.exit(1)


if __name__ == "__main__":
    main()
