"""
Utility functions for SVG to icon conversion.
"""

from svg_to_icon.utils.io import (
    load_config, load_svg, save_component, save_config, save_results
)

__all__ = [
    "load_config",
    "load_svg",
    "save_component",
    "save_config",
    "save_results",
]
