"""SVG to component conversion core."""

from svg2react.convert.batch import BatchFailure, BatchResult, ConvertedFile, convert_batch, convert_paths
from svg2react.convert.naming import normalize
from svg2react.convert.rules import DEFAULT_RULES, RewriteRule, apply_rules
from svg2react.convert.transformer import ConversionResult, convert, transform

__all__ = [
    "normalize",
    "transform",
    "convert",
    "ConversionResult",
    "RewriteRule",
    "DEFAULT_RULES",
    "apply_rules",
    "ConvertedFile",
    "BatchFailure",
    "BatchResult",
    "convert_batch",
    "convert_paths",
]
