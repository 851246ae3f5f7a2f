"""Component name derivation from SVG file names."""

from __future__ import annotations

import re

_SVG_SUFFIX = ".svg"
_SEPARATOR_RE = re.compile(r"[-_]")


def _capitalize(fragment: str) -> str:
    return fragment[:1].upper() + fragment[1:].lower()


def normalize(file_name: str) -> str:
    """Derive a PascalCase component name from a file name.

    ``icon-arrow-right.svg`` -> ``IconArrowRight``. The ``.svg`` suffix is
    matched case-sensitively. Characters other than ``-`` and ``_`` are kept
    as they are, so the result is only a valid identifier when the input
    fragments are. Empty input gives an empty name.
    """
    if file_name.endswith(_SVG_SUFFIX):
        file_name = file_name[: -len(_SVG_SUFFIX)]
    return "".join(_capitalize(fragment) for fragment in _SEPARATOR_RE.split(file_name))
