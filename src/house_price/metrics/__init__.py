"""
Lightweight training metrics recording.
"""

from .writer import TrainingMetricsWriter

__all__ = [
    "TrainingMetricsWriter",
]
