"""Conversion errors raised at the input boundary.

The core transform never raises; these are used by strict conversion,
the batch reader, the API and the CLI.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for input problems that stop a conversion."""


class EmptyInputError(ConversionError):
    pass


class InvalidComponentNameError(ConversionError):
    pass


class NotSvgError(ConversionError):
    pass


class SvgReadError(ConversionError):
    """Raw file bytes could not be turned into SVG text."""
