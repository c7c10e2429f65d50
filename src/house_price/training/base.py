"""
Base Training Interface and Common Components

This module provides the training configuration and the epoch loops shared
by all trainers. Subclasses decide how batches are unpacked and how epoch
results are reported.

Author: House Price Prediction Project Team
License: MIT
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple

import torch
import torch.nn as nn
import torch.optim as optim
from torch.utils.data import DataLoader
from tqdm import tqdm

logger = logging.getLogger(__name__)


@dataclass
class TrainingConfig:
    """
    Training and run configuration.

    Defaults reproduce the reference run: 50 epochs of batch size 16 with
    Adam at learning rate 0.001 on an 80/20 train/test split.
    """
    # Training Parameters
    epochs: int = 50
    batch_size: int = 16
    learning_rate: float = 0.001
    weight_decay: float = 0.0

    # Optimizer Configuration
    optimizer_type: str = "adam"  # adam, adamw, sgd
    momentum: float = 0.9  # for SGD
    betas: Tuple[float, float] = (0.9, 0.999)  # for Adam/AdamW

    # Data Configuration
    data_path: str = "california_housing.csv"
    test_fraction: float = 0.2
    shuffle_train: bool = True
    seed: Optional[int] = None

    # Device
    device: str = "cuda" if torch.cuda.is_available() else "cpu"

    # Output
    save_dir: str = "Results"
    run_name: str = "HousePricePrediction"
    save_png_chart: bool = False
    save_metrics_csv: bool = True
    show_progress: bool = False
    log_interval: int = 100  # Log every N batches at debug level

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.betas = tuple(self.betas)
        if self.epochs <= 0:
            raise ValueError(f"epochs must be positive, got {self.epochs}")
        if self.batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if not 0 < self.test_fraction < 1:
            raise ValueError(f"test_fraction must be between 0 and 1, got {self.test_fraction}")
        if self.optimizer_type.lower() not in ("adam", "adamw", "sgd"):
            raise ValueError(f"Unknown optimizer type: {self.optimizer_type}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "TrainingConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown training config keys: {sorted(unknown)}")
        return cls(**values)


class BaseTrainer(ABC):
    """
    Abstract base class for trainers.

    Runs one optimisation pass per epoch over the training loader, followed
    by an evaluation pass over the testing loader. The loss is mean squared
    error, the reported error is mean absolute error; both are averaged over
    batches.
    """

    def __init__(self,
                 model: nn.Module,
                 config: TrainingConfig,
                 train_loader: DataLoader,
                 test_loader: Optional[DataLoader] = None):
        """
        Initialize base trainer.

        Args:
            model: PyTorch model to train
            config: Training configuration
            train_loader: Training data loader
            test_loader: Optional testing data loader
        """
        self.model = model
        self.config = config
        self.train_loader = train_loader
        self.test_loader = test_loader

        self.model.to(self.config.device)

        self.optimizer = self._create_optimizer()
        self.criterion = self._create_loss_function()
        self.error_function = self._create_error_function()

        # Training state
        self.epoch = 0
        self.training_time = timedelta(0)
        self.training_history: Dict[str, List[float]] = {
            'loss': [],
            'train_error': [],
            'test_error': [],
        }

        logger.info(f"Initialized {self.__class__.__name__} with config: {self.config}")

    def _create_optimizer(self) -> optim.Optimizer:
        """Create optimizer based on configuration."""
        optimizer_type = self.config.optimizer_type.lower()
        if optimizer_type == "adam":
            return optim.Adam(
                self.model.parameters(),
                lr=self.config.learning_rate,
                weight_decay=self.config.weight_decay,
                betas=self.config.betas
            )
        elif optimizer_type == "adamw":
            return optim.AdamW(
                self.model.parameters(),
                lr=self.config.learning_rate,
                weight_decay=self.config.weight_decay,
                betas=self.config.betas
            )
        elif optimizer_type == "sgd":
            return optim.SGD(
                self.model.parameters(),
                lr=self.config.learning_rate,
                weight_decay=self.config.weight_decay,
                momentum=self.config.momentum
            )
        else:
            raise ValueError(f"Unknown optimizer type: {self.config.optimizer_type}")

    def _create_loss_function(self) -> nn.Module:
        """Create loss function. Can be overridden by subclasses."""
        return nn.MSELoss()

    def _create_error_function(self) -> nn.Module:
        """Create the reported error metric. Can be overridden by subclasses."""
        return nn.L1Loss()

    @abstractmethod
    def prepare_batch(self, batch: Dict[str, torch.Tensor]) -> Tuple[torch.Tensor, torch.Tensor]:
        """
        Prepare batch data for training.

        Args:
            batch: Raw batch from DataLoader

        Returns:
            Tuple of (inputs, targets) ready for model forward pass
        """
        pass

    @abstractmethod
    def forward_model(self, inputs: torch.Tensor) -> torch.Tensor:
        """
        Forward pass through the model.

        Args:
            inputs: Prepared input tensor

        Returns:
            Model outputs
        """
        pass

    def on_train_start(self) -> None:
        """Hook called before the first epoch."""

    def on_epoch_end(self, epoch: int, metrics: Dict[str, float]) -> None:
        """Hook called after each epoch with its averaged metrics."""
        logger.info(
            f"Epoch {epoch + 1}/{self.config.epochs} - Loss: {metrics['loss']:.6f}, "
            f"Train Error: {metrics['train_error']:.6f}, Test Error: {metrics['test_error']:.6f}"
        )

    def on_train_end(self) -> None:
        """Hook called after the last epoch."""

    def train_epoch(self) -> Dict[str, float]:
        """Train for one epoch."""
        self.model.train()
        total_loss = 0.0
        total_error = 0.0
        num_batches = 0

        progress_bar = tqdm(
            self.train_loader,
            desc=f"Epoch {self.epoch + 1}/{self.config.epochs}",
            disable=not self.config.show_progress
        )

        for batch_idx, batch in enumerate(progress_bar):
            inputs, targets = self.prepare_batch(batch)
            inputs = inputs.to(self.config.device)
            targets = targets.to(self.config.device)

            self.optimizer.zero_grad()
            outputs = self.forward_model(inputs)
            loss = self.criterion(outputs, targets)
            loss.backward()
            self.optimizer.step()

            with torch.no_grad():
                error = self.error_function(outputs, targets)

            total_loss += loss.item()
            total_error += error.item()
            num_batches += 1

            progress_bar.set_postfix({'loss': f'{loss.item():.6f}'})

            if batch_idx % self.config.log_interval == 0:
                logger.debug(f"Batch {batch_idx}, Loss: {loss.item():.6f}")

        if num_batches == 0:
            raise ValueError("Training loader produced no batches")

        return {
            'loss': total_loss / num_batches,
            'train_error': total_error / num_batches,
        }

    def test_epoch(self) -> Dict[str, float]:
        """Evaluate the error on the testing loader."""
        if self.test_loader is None:
            return {}

        self.model.eval()
        total_error = 0.0
        num_batches = 0

        with torch.no_grad():
            for batch in self.test_loader:
                inputs, targets = self.prepare_batch(batch)
                inputs = inputs.to(self.config.device)
                targets = targets.to(self.config.device)

                outputs = self.forward_model(inputs)
                total_error += self.error_function(outputs, targets).item()
                num_batches += 1

        if num_batches == 0:
            return {}

        return {'test_error': total_error / num_batches}

    def train(self) -> Dict[str, List[float]]:
        """
        Main training loop.

        Returns:
            Training history with one entry per epoch for
            'loss', 'train_error' and 'test_error'
        """
        logger.info("Starting training...")
        self.on_train_start()
        start_time = time.perf_counter()

        for epoch in range(self.config.epochs):
            self.epoch = epoch

            metrics = self.train_epoch()
            metrics['test_error'] = self.test_epoch().get('test_error', float('nan'))

            for key in self.training_history:
                self.training_history[key].append(metrics[key])

            self.on_epoch_end(epoch, metrics)

        self.training_time = timedelta(seconds=time.perf_counter() - start_time)
        logger.info(f"Training completed in {self.training_time.total_seconds():.2f} seconds")
        self.on_train_end()

        return self.training_history

    @property
    def final_test_error(self) -> float:
        """Test error of the last trained epoch."""
        if not self.training_history['test_error']:
            raise RuntimeError("No epoch has been trained yet")
        return self.training_history['test_error'][-1]
