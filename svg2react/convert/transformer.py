"""SVG markup -> React component source."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from svg2react.convert.rules import apply_rules
from svg2react.convert.template import render_component
from svg2react.convert.validation import (
    component_name_warnings,
    validate_component_name,
    validate_svg_source,
)
from svg2react.errors import EmptyInputError, InvalidComponentNameError, NotSvgError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    component_name: str
    code: str
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.warnings


def transform(svg_source: str, component_name: str) -> str:
    """Rewrite *svg_source* and wrap it in a component named *component_name*.

    Never raises: empty or malformed input just produces a broken component.
    Use :func:`convert` to check the inputs first.
    """
    return render_component(apply_rules(svg_source), component_name)


def convert(svg_source: str, component_name: str, *, strict: bool = False) -> ConversionResult:
    """Validate the inputs, then transform.

    Without *strict* every problem becomes a warning on the result and code
    is still produced. With *strict* the first problem raises a
    ``ConversionError`` subclass.
    """
    problems: list[str] = []

    svg_ok, svg_error = validate_svg_source(svg_source)
    if not svg_ok:
        if strict:
            exc = EmptyInputError if not svg_source.strip() else NotSvgError
            raise exc(svg_error)
        problems.append(svg_error)

    name_ok, name_error = validate_component_name(component_name)
    if not name_ok:
        if strict:
            exc = EmptyInputError if not component_name else InvalidComponentNameError
            raise exc(name_error)
        problems.append(name_error)

    problems.extend(component_name_warnings(component_name))

    code = transform(svg_source, component_name)
    if problems:
        logger.info("Converted %s with %d warning(s)", component_name or "<unnamed>", len(problems))
    else:
        logger.info("Converted %s (%d chars)", component_name, len(code))
    return ConversionResult(component_name=component_name, code=code, warnings=tuple(problems))
