"""
California house price regression: data pipeline, dense network training
and run reporting.
"""

from .pipeline import TrainingResult, run_training

__version__ = "0.1.0"

__all__ = [
    "TrainingResult",
    "run_training",
]
