"""
Global pytest configuration for the house price project.

This file contains shared fixtures and configuration that can be used
across all test modules in the project.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
import numpy as np
import torch
import matplotlib
import warnings

from fixtures.sample_data import write_housing_csv

# Use non-interactive backend for testing
matplotlib.use('Agg')

# Suppress warnings during tests
warnings.filterwarnings("ignore", category=UserWarning)
warnings.filterwarnings("ignore", category=FutureWarning)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for a single test."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def housing_csv(temp_dir):
    """Write a small synthetic housing CSV and return its path."""
    return write_housing_csv(temp_dir / "california_housing.csv", num_samples=120)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up the test environment."""
    # Set random seeds for reproducibility
    np.random.seed(42)
    torch.manual_seed(42)

    yield


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
