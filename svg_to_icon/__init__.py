"""
SVG to Icon - Converts SVG documents into icon component source files.

This package extracts the viewBox and inner markup of an SVG document and
generates a TSX component that renders the same graphic through a shared
wrapper component.
"""

__version__ = "0.1.0"

from svg_to_icon.core.extractor import ExtractedGraphic, MarkupExtractor, NotSvg, ViewBox
from svg_to_icon.core.generator import ComponentGenerator, to_identifier
from svg_to_icon.core.validator import MarkupValidator
from svg_to_icon.core.converter import SVGConverter
from svg_to_icon.errors import InvalidInputError, InvalidSvgContentError, SvgToIconError

__all__ = [
    "ExtractedGraphic",
    "MarkupExtractor",
    "NotSvg",
    "ViewBox",
    "ComponentGenerator",
    "to_identifier",
    "MarkupValidator",
    "SVGConverter",
    "InvalidInputError",
    "InvalidSvgContentError",
    "SvgToIconError",
]
