"""
Training components for the house price regressor.
"""

from .base import BaseTrainer, TrainingConfig
from .regression_trainer import HousePriceTrainer

__all__ = [
    'BaseTrainer',
    'TrainingConfig',
    'HousePriceTrainer',
]
