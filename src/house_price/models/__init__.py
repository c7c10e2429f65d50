"""
Regression models for house price prediction.
"""

from .regressor import HousePriceNet, HousePriceNetConfig

__all__ = [
    "HousePriceNet",
    "HousePriceNetConfig",
]
