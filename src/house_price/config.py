"""
Run configuration assembly.

Combines an optional YAML file with command line overrides into the
training and model dataclasses. The YAML layout is:

    training:
      epochs: 50
      batch_size: 16
      data_path: california_housing.csv
    model:
      hidden_sizes: [8, 8]
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import torch

from .models.regressor import HousePriceNetConfig
from .training.base import TrainingConfig
from .utils.yaml import load_run_config

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ("training", "model")


def resolve_device(device: str) -> str:
    """Map 'auto' to cuda when available, otherwise cpu."""
    if device == "auto":
        return "cuda" if torch.cuda.is_available() else "cpu"
    return device


def build_configs(config_path: Optional[Union[str, Path]] = None,
                  overrides: Optional[Dict[str, Any]] = None) -> Tuple[TrainingConfig, HousePriceNetConfig]:
    """
    Build training and model configs.

    Args:
        config_path: Optional YAML file with 'training' and 'model' sections
        overrides: Training values that take precedence over the file;
            None values are ignored

    Returns:
        Tuple of (TrainingConfig, HousePriceNetConfig)
    """
    training_overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
    merged = load_run_config(config_path, {'training': training_overrides})

    unknown = set(merged) - set(CONFIG_SECTIONS)
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    training_values = dict(merged.get('training') or {})
    if 'device' in training_values:
        training_values['device'] = resolve_device(training_values['device'])

    training_config = TrainingConfig.from_dict(training_values)
    model_config = HousePriceNetConfig.from_dict(dict(merged.get('model') or {}))

    logger.debug(f"Training config: {training_config}")
    logger.debug(f"Model config: {model_config}")
    return training_config, model_config
