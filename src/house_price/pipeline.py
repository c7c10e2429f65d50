"""
House Price Prediction Pipeline

End-to-end training run: load the housing CSV, split it, train the dense
regressor, write the transcript and render the error chart.

Author: House Price Prediction Project Team
License: MIT
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, TextIO

import numpy as np
import torch

from .dataset.housing import (
    HousingDataset,
    create_data_loaders,
    load_housing_csv,
    split_train_test,
)
from .metrics.writer import TrainingMetricsWriter
from .models.regressor import HousePriceNet, HousePriceNetConfig
from .training.base import TrainingConfig
from .training.regression_trainer import HousePriceTrainer
from .utils.console_logger import ConsoleLogger
from .visualization.chart import save_error_chart_html, save_error_chart_png

logger = logging.getLogger(__name__)

BANNER_RULE = "=" * 95


@dataclass
class TrainingResult:
    """Outcome of a training run."""
    run_id: str
    history: Dict[str, List[float]]
    final_test_error: float
    transcript_path: Path
    chart_path: Path
    png_path: Optional[Path] = None
    metrics_path: Optional[Path] = None
    model_info: Dict[str, object] = field(default_factory=dict)


def build_run_id(run_name: str, now: datetime) -> str:
    """Run identifier, e.g. HousePricePrediction_20261710_093000 (year, day, month)."""
    return f"{run_name}_{now.strftime('%Y%d%m_%H%M%S')}"


def seed_everything(seed: int) -> None:
    """Seed numpy and torch random generators for a reproducible run."""
    np.random.seed(seed)
    torch.manual_seed(seed)


def run_training(config: TrainingConfig,
                 model_config: Optional[HousePriceNetConfig] = None,
                 now: Optional[datetime] = None,
                 stream: Optional[TextIO] = None) -> TrainingResult:
    """
    Run a complete training session.

    Args:
        config: Training configuration
        model_config: Network configuration (defaults to 8-8-8-1)
        now: Run start time, used for the run id and banner
        stream: Console stream for the transcript (defaults to stdout)

    Returns:
        TrainingResult with history and output file paths
    """
    now = now if now is not None else datetime.now()
    run_id = build_run_id(config.run_name, now)

    if config.seed is not None:
        seed_everything(config.seed)

    with ConsoleLogger(config.save_dir, run_id, stream=stream) as console:
        console.write_line(BANNER_RULE)
        console.write_line(
            f"Assignment: California House Price Prediction "
            f"({now:%Y-%m-%d} - {now:%H:%M:%S} => {run_id})"
        )
        console.write_line(BANNER_RULE)
        console.write_line("")

        console.write_line(f"Using device: {config.device}")

        console.write_line("Loading data...")
        records = load_housing_csv(config.data_path)
        training, testing = split_train_test(records, config.test_fraction, config.seed)

        train_loader, test_loader = create_data_loaders(
            HousingDataset.from_records(training),
            HousingDataset.from_records(testing),
            batch_size=config.batch_size,
            shuffle_train=config.shuffle_train,
            seed=config.seed
        )

        model = HousePriceNet(model_config)
        console.write_line("Model architecture:")
        console.write_line(model.summary())

        metrics_writer = None
        metrics_path = None
        if config.save_metrics_csv:
            metrics_path = console.build_file_path(f"{run_id}_metrics.csv", delete_if_exists=True)
            metrics_writer = TrainingMetricsWriter(metrics_path)

        trainer = HousePriceTrainer(
            model=model,
            config=config,
            train_loader=train_loader,
            test_loader=test_loader,
            console=console,
            metrics_writer=metrics_writer
        )
        history = trainer.train()

        final_error = trainer.final_test_error
        console.write_line("")
        console.write_line(f"Final test MAE: {final_error:.2f}")

        chart_path = console.build_file_path(f"{run_id}_chart.html", delete_if_exists=True)
        save_error_chart_html(history, chart_path)

        png_path = None
        if config.save_png_chart:
            png_path = console.build_file_path(f"{run_id}_chart.png", delete_if_exists=True)
            save_error_chart_png(history, png_path)

        transcript_path = console.output_file_path

    logger.info(f"Run {run_id} finished, transcript at {transcript_path}")

    return TrainingResult(
        run_id=run_id,
        history=history,
        final_test_error=final_error,
        transcript_path=transcript_path,
        chart_path=chart_path,
        png_path=png_path,
        metrics_path=metrics_path,
        model_info=model.get_model_info()
    )
