#!/usr/bin/env python3
"""
Common utilities for training scripts.

Author: House Price Prediction Project Team
"""

import logging

# Log format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO):
    """
    Setup unified logging configuration.

    Args:
        level: Log level

    Returns:
        logger: Configured logger instance
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT
    )
    return logging.getLogger('__main__')


def add_common_arguments(parser):
    """
    Add common command line arguments for training scripts.

    Values left at None fall back to the YAML config, then to the
    TrainingConfig defaults.

    Args:
        parser: ArgumentParser instance
    """
    parser.add_argument("--config", type=str, default=None,
                        help="YAML run configuration (training/model sections)")

    # Data parameters
    parser.add_argument("--data_path", type=str, default=None,
                        help="Housing CSV file path")
    parser.add_argument("--save_dir", type=str, default=None,
                        help="Directory for transcript and charts")

    # Training parameters
    parser.add_argument("--epochs", type=int, default=None,
                        help="Number of training epochs")
    parser.add_argument("--batch_size", type=int, default=None,
                        help="Batch size")
    parser.add_argument("--learning_rate", type=float, default=None,
                        help="Learning rate")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for split, shuffling and weights")

    # Device parameters
    parser.add_argument("--device", type=str, default=None,
                        choices=["auto", "cpu", "cuda"],
                        help="Training device")

    # Output parameters
    parser.add_argument("--png", action="store_true", default=None,
                        help="Also save the error curves as PNG")
    parser.add_argument("--progress", action="store_true", default=None,
                        help="Show per-batch progress bars")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")


def args_to_overrides(args):
    """Collect training overrides from parsed arguments."""
    return {
        'data_path': args.data_path,
        'save_dir': args.save_dir,
        'epochs': args.epochs,
        'batch_size': args.batch_size,
        'learning_rate': args.learning_rate,
        'seed': args.seed,
        'device': args.device,
        'save_png_chart': args.png,
        'show_progress': args.progress,
    }
