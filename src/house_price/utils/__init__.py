"""
Utility helpers shared by the training pipeline.
"""

from .console_logger import ConsoleLogger
from .float_ext import output10, trim

__all__ = [
    "ConsoleLogger",
    "output10",
    "trim",
]
