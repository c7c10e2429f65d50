"""
Training error charts.

Renders the per-epoch training and testing error as an interactive HTML
chart (plotly) and, optionally, as a static PNG (matplotlib).
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import plotly.graph_objects as go

logger = logging.getLogger(__name__)

CHART_TITLE = "California House Training"
X_TITLE = "Epoch"
Y_TITLE = "Mean absolute error (MAE)"


def create_error_chart(training_error: Sequence[float],
                       testing_error: Sequence[float],
                       title: str = CHART_TITLE) -> go.Figure:
    """
    Build a line chart of training and testing error against epoch index.

    Args:
        training_error: Training error per epoch
        testing_error: Testing error per epoch
        title: Chart title

    Returns:
        Plotly figure with a 'training' and a 'testing' series
    """
    if len(training_error) != len(testing_error):
        raise ValueError(
            f"Series lengths differ: {len(training_error)} training vs {len(testing_error)} testing"
        )

    epochs = list(range(len(training_error)))

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=epochs,
        y=list(training_error),
        name="training",
        mode="lines+markers"
    ))
    fig.add_trace(go.Scatter(
        x=epochs,
        y=list(testing_error),
        name="testing",
        mode="lines+markers"
    ))
    fig.update_layout(
        title=title,
        xaxis_title=X_TITLE,
        yaxis_title=Y_TITLE
    )
    return fig


def save_error_chart_html(history: Dict[str, List[float]], output_path: Union[str, Path]) -> Path:
    """
    Write the error chart as a self-contained HTML file.

    The plotly.js bundle is embedded so the file opens without network access.
    """
    output_path = Path(output_path)
    fig = create_error_chart(history['train_error'], history['test_error'])
    fig.write_html(str(output_path), include_plotlyjs=True, full_html=True)
    logger.info(f"Saved error chart to {output_path}")
    return output_path


def save_error_chart_png(history: Dict[str, List[float]],
                         output_path: Union[str, Path],
                         figsize=(8, 6)) -> Path:
    """Write the training and testing error curves as a PNG image."""
    output_path = Path(output_path)
    epochs = range(len(history['train_error']))

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(epochs, history['train_error'], 'b-o', label='training', linewidth=2, markersize=3)
    ax.plot(epochs, history['test_error'], 'r-s', label='testing', linewidth=2, markersize=3)
    ax.set_title(CHART_TITLE)
    ax.set_xlabel(X_TITLE)
    ax.set_ylabel(Y_TITLE)
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)

    logger.info(f"Saved error curves to {output_path}")
    return output_path
