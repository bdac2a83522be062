"""
Input/output utilities for reading SVG sources and writing generated components.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)


def load_svg(file_path: Union[str, Path]) -> str:
    """
    Load SVG markup from a file.
    
    Args:
        file_path: Path to the SVG file
        
    Returns:
        SVG markup as a string
    """
    file_path = Path(file_path)
    
    if not file_path.exists():
        raise FileNotFoundError(f"SVG file not found: {file_path}")
    
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except Exception as e:
        logger.error(f"Error loading SVG file {file_path}: {e}")
        raise


def save_component(
    source_text: str, 
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> None:
    """
    Save generated component source to a file.
    
    Args:
        source_text: Generated component source
        output_path: Path to save the component
        create_dirs: Whether to create parent directories if they don't exist
    """
    output_path = Path(output_path)
    
    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)
    
    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(source_text)
        logger.debug(f"Component saved to: {output_path}")
    except Exception as e:
        logger.error(f"Error saving component to {output_path}: {e}")
        raise


def save_results(
    results: Union[pd.DataFrame, List[Dict[str, Any]]], 
    output_path: Union[str, Path]
) -> Path:
    """
    Save conversion results to a file.
    
    The format is chosen from the file suffix: '.json' writes records,
    anything else writes CSV.
    
    Args:
        results: DataFrame or list of dictionaries with results
        output_path: Path to save the results
        
    Returns:
        Path the results were written to
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)
    
    if isinstance(results, list):
        results = pd.DataFrame(results)
    
    try:
        if output_path.suffix.lower() == '.json':
            results.to_json(output_path, orient='records', indent=2)
            logger.info(f"Results saved to JSON: {output_path}")
        else:
            results.to_csv(output_path, index=False)
            logger.info(f"Results saved to CSV: {output_path}")
    except Exception as e:
        logger.error(f"Error saving results: {e}")
        raise
    
    return output_path


def load_config(
    config_path: Union[str, Path],
    defaults: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.
    
    When defaults are given, the file may only override their keys and the
    merged settings are returned.
    
    Args:
        config_path: Path to the configuration file
        defaults: Optional settings the file is merged over
        
    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)
    
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except Exception as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise
    
    if not isinstance(overrides, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")
    if defaults is None:
        return overrides
    
    unknown = sorted(set(overrides) - set(defaults))
    if unknown:
        raise ValueError(f"Unknown configuration keys in {config_path}: {', '.join(unknown)}")
    
    merged = dict(defaults)
    merged.update(overrides)
    return merged


def save_config(
    config: Dict[str, Any], 
    output_path: Union[str, Path]
) -> Path:
    """
    Save a run record (input, settings, summary) as JSON.
    
    Keys are sorted so records of identical runs are identical, and values
    such as paths are written as strings.
    
    Args:
        config: Dictionary describing the run
        output_path: Path to save the record
        
    Returns:
        Path the record was written to
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)
    
    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2, sort_keys=True, default=str)
        logger.info(f"Run configuration saved to: {output_path}")
    except Exception as e:
        logger.error(f"Error saving configuration to {output_path}: {e}")
        raise
    
    return output_path
