"""
YAML Utility Functions

Loading and merging of YAML run configuration files.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[Any, Any], update: Dict[Any, Any]) -> Dict[Any, Any]:
    """
    Deep merge two dictionaries without modifying either of them.

    Nested dictionaries are merged recursively, lists and scalars in
    ``update`` replace the value in ``base``.
    """
    result = dict(base)

    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file_to_dict(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file into a dictionary.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"YAML file does not exist: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        logger.warning(f"YAML file {config_path} is empty")
        return {}
    if not isinstance(config_dict, dict):
        raise ValueError(f"YAML file {config_path} must contain a mapping, got {type(config_dict).__name__}")

    return config_dict


def load_run_config(config_path: Optional[Union[str, Path]],
                    overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load a run configuration and apply overrides on top of it.

    Args:
        config_path: Optional YAML file with ``training`` and ``model`` sections
        overrides: Values that take precedence over the file

    Returns:
        Merged configuration dictionary
    """
    result: Dict[str, Any] = {}
    if config_path is not None:
        result = load_yaml_file_to_dict(config_path)
        logger.info(f"Loaded run configuration from {config_path}")

    if overrides:
        result = deep_merge(result, overrides)

    return result
