"""
Core functionality for SVG to icon conversion.
"""

from svg_to_icon.core.extractor import (
    ExtractedGraphic, MarkupExtractor, NotSvg, NotSvgReason, ViewBox,
    extract, looks_like_svg
)
from svg_to_icon.core.generator import (
    ComponentGenerator, generate, output_file_name, to_identifier
)
from svg_to_icon.core.validator import MarkupValidator

__all__ = [
    "ExtractedGraphic",
    "MarkupExtractor",
    "NotSvg",
    "NotSvgReason",
    "ViewBox",
    "extract",
    "looks_like_svg",
    "ComponentGenerator",
    "generate",
    "output_file_name",
    "to_identifier",
    "MarkupValidator",
]
