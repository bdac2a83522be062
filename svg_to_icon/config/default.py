"""
Default configuration settings for SVG to icon component conversion.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from svg_to_icon.utils.io import load_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    # Generated component settings
    "component_package": "@imile/components",  # Package providing the wrapper component
    "wrapper_component": "SvgIcon",  # Wrapper component rendered by every icon
    "props_type": "SvgIconProps",  # Property type of the wrapper component
    "component_suffix": "Icon",  # Appended to the identifier for names and files
    "file_extension": ".tsx",  # Extension of generated component files
    
    # Extraction settings
    "default_size": 24,  # Width and height used when the SVG declares no size
    
    # Markup check settings
    "check_markup": True,  # Whether to check inner markup before writing
    "max_markup_size": 100000,  # Maximum inner markup size in bytes
}


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings, merging a JSON configuration file over the defaults.
    
    Args:
        config_path: Optional path to a JSON configuration file
        
    Returns:
        Dictionary of settings
    """
    if not config_path:
        return dict(DEFAULT_CONFIG)
    
    settings = load_config(config_path, defaults=DEFAULT_CONFIG)
    logger.debug(f"Loaded settings from {config_path}")
    return settings
