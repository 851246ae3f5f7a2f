"""svg2react: turn SVG markup into React/TSX components."""

__version__ = "0.1.0"
