"""
Configuration for SVG to icon conversion.
"""

from svg_to_icon.config.default import DEFAULT_CONFIG, load_settings

__all__ = [
    "DEFAULT_CONFIG",
    "load_settings",
]
