"""
Dense House Price Regressor

A small feed-forward network mapping the eight housing block features to
a single median house value (in thousands).

Author: House Price Prediction Project Team
License: MIT
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

import torch
import torch.nn as nn

logger = logging.getLogger(__name__)


@dataclass
class HousePriceNetConfig:
    """
    Configuration class for the house price regressor.
    """
    input_size: int = 8
    hidden_sizes: Tuple[int, ...] = (8, 8)
    output_size: int = 1

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.hidden_sizes = tuple(self.hidden_sizes)
        if self.input_size <= 0 or self.output_size <= 0:
            raise ValueError("input_size and output_size must be positive")
        if any(size <= 0 for size in self.hidden_sizes):
            raise ValueError(f"hidden_sizes must be positive, got {self.hidden_sizes}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "HousePriceNetConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown model config keys: {sorted(unknown)}")
        return cls(**values)


class HousePriceNet(nn.Module):
    """
    Dense regression network.

    Architecture (default config):
        Linear(8, 8) -> ReLU -> Linear(8, 8) -> ReLU -> Linear(8, 1)

    Input shape: [batch_size, input_size]
    Output shape: [batch_size, output_size]
    """

    def __init__(self, config: HousePriceNetConfig = None):
        super(HousePriceNet, self).__init__()
        self.config = config if config is not None else HousePriceNetConfig()

        layers = []
        in_features = self.config.input_size
        for hidden_size in self.config.hidden_sizes:
            layers.append(nn.Linear(in_features, hidden_size))
            layers.append(nn.ReLU())
            in_features = hidden_size
        layers.append(nn.Linear(in_features, self.config.output_size))

        self.network = nn.Sequential(*layers)

        logger.info(f"Initialized HousePriceNet with config: {self.config}")

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """
        Forward pass.

        Args:
            x: Feature tensor [batch_size, input_size]

        Returns:
            Predictions [batch_size, output_size]
        """
        if x.dim() != 2 or x.size(-1) != self.config.input_size:
            raise ValueError(
                f"Expected input of shape [batch, {self.config.input_size}], got {list(x.shape)}"
            )
        return self.network(x)

    def get_model_info(self) -> Dict[str, Any]:
        """Get parameter counts and architecture details."""
        total_params = sum(p.numel() for p in self.parameters())
        trainable_params = sum(p.numel() for p in self.parameters() if p.requires_grad)

        return {
            'model_type': self.__class__.__name__,
            'total_parameters': total_params,
            'trainable_parameters': trainable_params,
            'input_size': self.config.input_size,
            'hidden_sizes': list(self.config.hidden_sizes),
            'output_size': self.config.output_size,
        }

    def summary(self) -> str:
        """Multi-line layer table for the run transcript."""
        lines = [
            f"{'Layer':<12}{'Type':<10}{'Output':>8}{'Params':>10}",
            "-" * 40,
        ]
        for index, layer in enumerate(self.network):
            params = sum(p.numel() for p in layer.parameters())
            output = layer.out_features if isinstance(layer, nn.Linear) else "-"
            lines.append(f"{'layer_' + str(index):<12}{type(layer).__name__:<10}{output:>8}{params:>10}")
        lines.append("-" * 40)
        lines.append(f"Total parameters: {self.get_model_info()['total_parameters']}")
        return "\n".join(lines)
