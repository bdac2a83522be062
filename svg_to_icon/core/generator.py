"""
Component source generation from extracted SVG graphics.
"""
import logging
import math
import re
from decimal import Decimal

from svg_to_icon.config.default import DEFAULT_CONFIG
from svg_to_icon.core.extractor import ExtractedGraphic, ViewBox

logger = logging.getLogger(__name__)

WORD_SEPARATORS = re.compile(r"[-_. ]+")
NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")

COMPONENT_TEMPLATE = """import {{ {wrapper} }} from '{package}';

import type {{ {props_type} }} from '{package}';

export function {name}(props: {props_type}) {{
  return (
    <{wrapper} viewBox="{view_box}" {{...props}}>
      {inner_content}
    </{wrapper}>
  );
}}
"""


def to_identifier(base_name: str) -> str:
    """
    Turn a file stem into a capitalized alphanumeric identifier.

    Args:
        base_name: Name such as "my-icon_v2.final"

    Returns:
        Identifier such as "MyIconV2Final"
    """
    words = WORD_SEPARATORS.sub(" ", base_name).split(" ")
    joined = "".join(word[:1].upper() + word[1:].lower() for word in words)
    return NON_ALPHANUMERIC.sub("", joined)


def format_number(value: float) -> str:
    """
    Render a number in its natural decimal form.

    Uses the shortest round-tripping digits, written out in full between
    1e-6 and 1e21 and in exponent form outside that range ("24", "0.5",
    "12345678901234567000", "1e-7", "1e+21").
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    shortest = repr(number)
    if 1e-6 <= abs(number) < 1e21:
        text = format(Decimal(shortest), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, exponent = shortest.split("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def format_viewbox(view_box: ViewBox) -> str:
    """Render a ViewBox as the four-number viewBox attribute value."""
    size = f"{format_number(view_box.width)} {format_number(view_box.height)}"
    if view_box.x is not None and view_box.y is not None:
        return f"{format_number(view_box.x)} {format_number(view_box.y)} {size}"
    return f"0 0 {size}"


class ComponentGenerator:
    """
    Renders an ExtractedGraphic into icon component source.

    Generation is a plain template expansion: identical inputs always give
    identical text, and any ExtractedGraphic is accepted.
    """

    def __init__(
        self,
        component_package: str = DEFAULT_CONFIG["component_package"],
        wrapper_component: str = DEFAULT_CONFIG["wrapper_component"],
        props_type: str = DEFAULT_CONFIG["props_type"],
        component_suffix: str = DEFAULT_CONFIG["component_suffix"],
        file_extension: str = DEFAULT_CONFIG["file_extension"],
    ):
        """
        Initialize the generator.

        Args:
            component_package: Package the wrapper component is imported from
            wrapper_component: Name of the wrapper component
            props_type: Name of the wrapper's property type
            component_suffix: Suffix appended to the identifier
            file_extension: Extension of generated files
        """
        self.component_package = component_package
        self.wrapper_component = wrapper_component
        self.props_type = props_type
        self.component_suffix = component_suffix
        self.file_extension = file_extension

    def component_name(self, base_name: str) -> str:
        """Name of the generated component for a base name."""
        return f"{to_identifier(base_name)}{self.component_suffix}"

    def generate(self, base_name: str, graphic: ExtractedGraphic) -> str:
        """
        Generate component source for a graphic.

        Args:
            base_name: Base name the component is named after
            graphic: Graphic produced by the extractor

        Returns:
            Component source text
        """
        name = self.component_name(base_name)
        logger.debug(f"Generating component {name}")

        return COMPONENT_TEMPLATE.format(
            wrapper=self.wrapper_component,
            package=self.component_package,
            props_type=self.props_type,
            name=name,
            view_box=format_viewbox(graphic.view_box),
            inner_content=graphic.inner_content,
        )

    def output_file_name(self, base_name: str) -> str:
        """File name of the generated component for a base name."""
        return f"{self.component_name(base_name)}{self.file_extension}"


_default_generator = ComponentGenerator()


def generate(base_name: str, graphic: ExtractedGraphic) -> str:
    """Generate component source with the default settings."""
    return _default_generator.generate(base_name, graphic)


def output_file_name(base_name: str) -> str:
    """Output file name for a base name with the default settings."""
    return _default_generator.output_file_name(base_name)
