"""
Markup extraction for SVG documents.

Recovers the viewBox geometry and the inner markup of the first SVG root
element found in a text blob. Matching is done with regular expressions over
the raw text so that partial or slightly malformed documents still convert.
"""
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from svg_to_icon.config.default import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

SVG_ELEMENT_PATTERN = re.compile(r"<svg(?=[\s/>])([^>]*)>([\s\S]*?)</svg\s*>", re.IGNORECASE)
VIEWBOX_PATTERN = re.compile(r"(?<![\w-])viewBox\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE)
WIDTH_PATTERN = re.compile(r"(?<![\w-])width\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE)
HEIGHT_PATTERN = re.compile(r"(?<![\w-])height\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE)
NAMESPACE_PATTERN = re.compile(r"(?<![\w-])xmlns:([\w.-]+)\s*=\s*[\"']([^\"']*)[\"']")

# Leading numeric prefix, so "16px" reads as 16 and "100%" as 100.
NUMBER_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class NotSvgReason(Enum):
    """Why a text blob could not be turned into a graphic."""
    NO_SVG_ROOT = "no_svg_root"
    MALFORMED_VIEWBOX = "malformed_viewbox"


@dataclass(frozen=True)
class ViewBox:
    """The user-space rectangle of an SVG image."""
    width: float
    height: float
    x: Optional[float] = None
    y: Optional[float] = None


@dataclass(frozen=True)
class ExtractedGraphic:
    """Geometry and inner markup recovered from an SVG document."""
    view_box: ViewBox
    inner_content: str
    # Prefixed namespaces declared on the root, as (prefix, uri) pairs
    namespaces: Tuple[Tuple[str, str], ...] = ()


@dataclass(frozen=True)
class NotSvg:
    """Signals that the input holds no usable SVG root element."""
    reason: NotSvgReason
    detail: Optional[str] = None


ExtractionResult = Union[ExtractedGraphic, NotSvg]


def parse_number(value: str) -> Optional[float]:
    """
    Parse the leading real number of an attribute value.

    Args:
        value: Attribute value, e.g. "16", "-0.5", "24px"

    Returns:
        The parsed number, or None if no finite number leads the value
    """
    match = NUMBER_PATTERN.match(value)
    if not match:
        return None

    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


class MarkupExtractor:
    """
    Extracts an ExtractedGraphic from raw SVG text.

    The extractor never raises: every failure is reported as a NotSvg value.
    A present but malformed viewBox is a failure, while a missing size falls
    back to the width/height attributes and finally to a square default.
    """

    def __init__(self, default_size: float = DEFAULT_CONFIG["default_size"]):
        """
        Initialize the extractor.

        Args:
            default_size: Width and height used when the SVG declares no size
        """
        self.default_size = default_size

    def extract(self, raw_text: str) -> ExtractionResult:
        """
        Extract the viewBox and inner markup of the first SVG element.

        Args:
            raw_text: Complete SVG document text

        Returns:
            ExtractedGraphic on success, NotSvg otherwise
        """
        try:
            return self._extract(raw_text)
        except Exception as e:
            logger.error(f"Error parsing SVG: {e}")
            return NotSvg(NotSvgReason.NO_SVG_ROOT, detail=str(e))

    def looks_like_svg(self, raw_text: str) -> bool:
        """Check whether the text contains an SVG root element at all."""
        try:
            return SVG_ELEMENT_PATTERN.search(raw_text) is not None
        except TypeError:
            return False

    def _extract(self, raw_text: str) -> ExtractionResult:
        svg_match = SVG_ELEMENT_PATTERN.search(raw_text)
        if not svg_match:
            logger.debug("No <svg> element found")
            return NotSvg(NotSvgReason.NO_SVG_ROOT, detail="No <svg> element found")

        attributes, inner = svg_match.group(1), svg_match.group(2)
        inner_content = inner.strip()
        namespaces = tuple(NAMESPACE_PATTERN.findall(attributes))

        viewbox_match = VIEWBOX_PATTERN.search(attributes)
        if viewbox_match:
            view_box = self._parse_viewbox(viewbox_match.group(1))
            if view_box is None:
                detail = f"Malformed viewBox: {viewbox_match.group(1)!r}"
                logger.debug(detail)
                return NotSvg(NotSvgReason.MALFORMED_VIEWBOX, detail=detail)
        else:
            view_box = self._fallback_viewbox(attributes)

        return ExtractedGraphic(
            view_box=view_box,
            inner_content=inner_content,
            namespaces=namespaces,
        )

    def _parse_viewbox(self, value: str) -> Optional[ViewBox]:
        tokens = re.split(r"\s+", value)
        if len(tokens) != 4:
            return None

        numbers = [parse_number(token) for token in tokens]
        if any(number is None for number in numbers):
            return None

        x, y, width, height = numbers
        return ViewBox(width=width, height=height, x=x, y=y)

    def _fallback_viewbox(self, attributes: str) -> ViewBox:
        width_match = WIDTH_PATTERN.search(attributes)
        height_match = HEIGHT_PATTERN.search(attributes)

        if width_match and height_match:
            width = parse_number(width_match.group(1))
            height = parse_number(height_match.group(1))
            if width is not None and height is not None:
                return ViewBox(width=width, height=height, x=0, y=0)

        logger.debug(f"No usable size on <svg>, using default {self.default_size}")
        return ViewBox(width=self.default_size, height=self.default_size, x=0, y=0)


_default_extractor = MarkupExtractor()


def extract(raw_text: str) -> ExtractionResult:
    """Extract a graphic from raw SVG text with default settings."""
    return _default_extractor.extract(raw_text)


def looks_like_svg(raw_text: str) -> bool:
    """Check whether the text contains an SVG root element."""
    return _default_extractor.looks_like_svg(raw_text)
