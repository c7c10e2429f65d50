"""
Chart rendering for training runs.
"""

from .chart import create_error_chart, save_error_chart_html, save_error_chart_png

__all__ = [
    "create_error_chart",
    "save_error_chart_html",
    "save_error_chart_png",
]
