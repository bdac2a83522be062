"""
Exceptions raised by the SVG to icon conversion pipeline.
"""
from svg_to_icon.core.extractor import NotSvg


class SvgToIconError(Exception):
    """Base exception for conversion errors."""
    pass


class InvalidInputError(SvgToIconError):
    """Raised when the input path is not a usable SVG file."""
    pass


class InvalidSvgContentError(SvgToIconError):
    """Raised when an SVG file holds no usable SVG markup."""

    def __init__(self, not_svg: NotSvg):
        super().__init__("Invalid SVG content")
        self.not_svg = not_svg

    @property
    def reason(self):
        return self.not_svg.reason
