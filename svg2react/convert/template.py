"""TSX component template."""

from __future__ import annotations

_COMPONENT_TEMPLATE = """\
interface {name}Props {{
  className?: string;
}}

export default function {name}({{ className }}: {name}Props) {{
  return (
    {markup}
  );
}}"""


def render_component(markup: str, component_name: str) -> str:
    """Wrap rewritten SVG markup in a default-exported function component.

    The markup is inserted verbatim; nothing is escaped or re-indented.
    """
    return _COMPONENT_TEMPLATE.format(name=component_name, markup=markup)
