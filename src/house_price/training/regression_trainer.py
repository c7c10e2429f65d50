"""
House Price Regression Trainer

Trains the dense regressor on housing batches and writes the per-epoch
loss/error table to the run transcript.

Author: House Price Prediction Project Team
License: MIT
"""

import logging
from typing import Dict, Optional, Tuple

import torch
import torch.nn as nn
from torch.utils.data import DataLoader

from .base import BaseTrainer, TrainingConfig
from ..metrics.writer import TrainingMetricsWriter
from ..utils.console_logger import ConsoleLogger
from ..utils.float_ext import output10

logger = logging.getLogger(__name__)

TABLE_HEADER = (
    "     \t     Train\t     Train\t      Test",
    "Epoch\t      Loss\t     Error\t     Error",
    "-----\t----------\t----------\t----------",
)


class HousePriceTrainer(BaseTrainer):
    """
    Trainer for the house price regressor.

    Batches are dictionaries with 'features' [batch, 8] and 'label' [batch, 1].
    When a console logger is given, the epoch table is written to it; when a
    metrics writer is given, each epoch is also recorded to CSV.
    """

    def __init__(self,
                 model: nn.Module,
                 config: TrainingConfig,
                 train_loader: DataLoader,
                 test_loader: Optional[DataLoader] = None,
                 console: Optional[ConsoleLogger] = None,
                 metrics_writer: Optional[TrainingMetricsWriter] = None):
        super().__init__(model, config, train_loader, test_loader)
        self.console = console
        self.metrics_writer = metrics_writer

    def prepare_batch(self, batch: Dict[str, torch.Tensor]) -> Tuple[torch.Tensor, torch.Tensor]:
        return batch['features'], batch['label']

    def forward_model(self, inputs: torch.Tensor) -> torch.Tensor:
        return self.model(inputs)

    def on_train_start(self) -> None:
        if self.console is None:
            return
        for line in TABLE_HEADER:
            self.console.write_line(line)

    def on_epoch_end(self, epoch: int, metrics: Dict[str, float]) -> None:
        super().on_epoch_end(epoch, metrics)

        if self.console is not None:
            self.console.write(
                f"{epoch:5}\t{output10(metrics['loss'])}\t{output10(metrics['train_error'])}\t"
            )
            self.console.write_line(output10(metrics['test_error']))

        if self.metrics_writer is not None:
            self.metrics_writer.record_epoch(epoch, metrics)

    def on_train_end(self) -> None:
        if self.console is not None:
            self.console.write_line(
                f"model training done (epochs={self.config.epochs}, "
                f"batchSize={self.config.batch_size}): training time: {self.training_time}"
            )
            self.console.write_line("")

        if self.metrics_writer is not None:
            self.metrics_writer.save_summary(total_epochs=self.epoch + 1)
