"""Input checks applied at the conversion boundary.

The transform itself accepts any text. These checks let callers reject
inputs that would produce an unusable component before the code is shown
or written to disk.
"""

from __future__ import annotations

import re

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
# Lowercase only: the className rule matches a literal "<svg"
_SVG_OPEN_RE = re.compile(r"<svg[\s>/]")


def is_valid_component_name(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def validate_component_name(name: str) -> tuple[bool, str]:
    """Returns (is_valid, error_message)."""
    if not name:
        return False, "Component name is empty"
    if not is_valid_component_name(name):
        return False, f"Component name {name!r} is not a valid identifier"
    return True, ""


def validate_svg_source(svg_text: str) -> tuple[bool, str]:
    """Returns (is_valid, error_message)."""
    if not svg_text or not svg_text.strip():
        return False, "SVG source is empty"
    if not _SVG_OPEN_RE.search(svg_text):
        return False, "Missing <svg> tag"
    return True, ""


def component_name_warnings(name: str) -> list[str]:
    """Soft problems that still leave a compilable component."""
    warnings: list[str] = []
    if name and is_valid_component_name(name) and not name[0].isupper():
        # JSX treats lowercase tags as DOM elements
        warnings.append(f"Component name {name!r} should start with an uppercase letter")
    return warnings
