#!/usr/bin/env python3
"""
California House Price Training Script

Train the dense house price regressor and write the run transcript,
metrics CSV and error chart to the results directory.

Usage:
    python scripts/train/train_house_price.py
    python scripts/train/train_house_price.py --config configs/default.yaml
    python scripts/train/train_house_price.py --data_path data/california_housing.csv --epochs 20 --png

Author: House Price Prediction Project Team
"""

import argparse
import logging

from common import setup_logging, add_common_arguments, args_to_overrides

from house_price.config import build_configs
from house_price.pipeline import run_training


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Train the California house price regression model",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_common_arguments(parser)
    return parser.parse_args()


def main():
    """Main function for house price training"""
    args = parse_args()
    logger = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    training_config, model_config = build_configs(args.config, args_to_overrides(args))
    logger.info(f"Training on {training_config.data_path} using {training_config.device}")

    result = run_training(training_config, model_config)

    logger.info(f"Final test MAE: {result.final_test_error:.4f}")
    logger.info(f"Transcript: {result.transcript_path}")
    logger.info(f"Chart: {result.chart_path}")


if __name__ == "__main__":
    main()
