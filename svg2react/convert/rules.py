"""Ordered rewrite rules turning SVG attributes into JSX-friendly ones.

Each rule runs over the whole text produced by the previous rule, so the
order of DEFAULT_RULES matters: ``stroke-width`` must already be
``strokeWidth`` by the time the ``width`` rule runs, otherwise it would be
rewritten to ``100%``.

Usage:
    markup = apply_rules('<svg width="24"><path stroke-width="2"/></svg>')
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class RewriteRule:
    id: str
    pattern: re.Pattern[str]
    replacement: Replacement
    description: str = ""

    def apply(self, text: str) -> tuple[str, int]:
        """Return the rewritten text and the number of substitutions."""
        return self.pattern.subn(self.replacement, text)


def _camel_case(match: re.Match[str]) -> str:
    return match.group(1).upper()


DEFAULT_RULES: tuple[RewriteRule, ...] = (
    RewriteRule(
        id="camel-case",
        pattern=re.compile(r"-([a-z])"),
        replacement=_camel_case,
        description="Hyphenated names to camelCase (stroke-width -> strokeWidth)",
    ),
    RewriteRule(
        id="fill-color",
        # fill="none" keeps transparent shapes transparent
        pattern=re.compile(r'fill="(?!none")[^"]*"'),
        replacement='fill="currentColor"',
        description="Fill colors inherit the text color",
    ),
    RewriteRule(
        id="stroke-color",
        pattern=re.compile(r'stroke="[^"]*"'),
        replacement='stroke="currentColor"',
        description="Stroke colors inherit the text color",
    ),
    RewriteRule(
        id="width",
        pattern=re.compile(r'width="[^"]*"'),
        replacement='width="100%"',
        description="Width follows the container",
    ),
    RewriteRule(
        id="height",
        pattern=re.compile(r'height="[^"]*"'),
        replacement='height="100%"',
        description="Height follows the container",
    ),
    RewriteRule(
        id="class-name",
        pattern=re.compile(r"<svg"),
        replacement="<svg className={className}",
        description="Root element receives the className prop",
    ),
)


def apply_rules(text: str, rules: Sequence[RewriteRule] = DEFAULT_RULES) -> str:
    """Apply *rules* in order, each to the output of the previous one."""
    for rule in rules:
        text, count = rule.apply(text)
        logger.debug("  %s: %d substitution(s)", rule.id, count)
    return text
