"""
California Housing Dataset

Loading, splitting and batching of the California housing block data.
Each CSV row holds nine numeric columns; the first eight form the feature
vector and the ninth (median house value) is the regression target.

Author: House Price Prediction Project Team
License: MIT
"""

import logging
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
import torch
from sklearn.model_selection import train_test_split
from torch.utils.data import DataLoader, Dataset

logger = logging.getLogger(__name__)

# Column order of the CSV file
COLUMN_NAMES = (
    'longitude',
    'latitude',
    'housing_median_age',
    'total_rooms',
    'total_bedrooms',
    'population',
    'households',
    'median_income',
    'median_house_value',
)
NUM_FEATURES = 8

# Labels are expressed in thousands of dollars
LABEL_SCALE = 1000.0


@dataclass
class HouseBlockData:
    """One housing block record."""
    longitude: float
    latitude: float
    housing_median_age: float
    total_rooms: float
    total_bedrooms: float
    population: float
    households: float
    median_income: float
    median_house_value: float

    def get_features(self) -> List[float]:
        """Return the eight predictor values in column order, without the label."""
        return list(astuple(self)[:NUM_FEATURES])

    def get_label(self) -> float:
        """Return the median house value in thousands."""
        return self.median_house_value / LABEL_SCALE


def load_housing_csv(path: Union[str, Path]) -> List[HouseBlockData]:
    """
    Load housing records from a comma separated file with a header row.

    Columns are taken by position, header names are not checked.

    Args:
        path: Path to the CSV file

    Returns:
        List of records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a row does not hold nine finite numbers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Housing data file not found: {path}")

    frame = pd.read_csv(path, sep=',', header=0)
    if frame.shape[1] != len(COLUMN_NAMES):
        raise ValueError(
            f"Expected {len(COLUMN_NAMES)} columns in {path}, got {frame.shape[1]}"
        )

    try:
        values = frame.to_numpy(dtype=np.float64)
    except ValueError as e:
        raise ValueError(f"Non-numeric value in {path}: {e}") from e

    bad_rows = ~np.isfinite(values).all(axis=1)
    if bad_rows.any():
        first_bad = int(np.argmax(bad_rows))
        # +2 for the header row and 1-based line numbers
        raise ValueError(
            f"{int(bad_rows.sum())} malformed rows in {path}, first at line {first_bad + 2}"
        )

    records = [HouseBlockData(*(float(v) for v in row)) for row in values]
    logger.info(f"Loaded {len(records)} housing records from {path}")
    return records


def split_train_test(records: Sequence[HouseBlockData],
                     test_fraction: float = 0.2,
                     seed: Optional[int] = None) -> Tuple[List[HouseBlockData], List[HouseBlockData]]:
    """
    Randomly split records into training and testing partitions.

    Args:
        records: Records to split
        test_fraction: Fraction of records assigned to the testing partition
        seed: Optional random seed for a reproducible split

    Returns:
        Tuple of (training, testing) records
    """
    if not 0 < test_fraction < 1:
        raise ValueError(f"test_fraction must be between 0 and 1, got {test_fraction}")

    training, testing = train_test_split(
        list(records),
        test_size=test_fraction,
        random_state=seed,
        shuffle=True
    )
    logger.info(f"Split data into {len(training)} training and {len(testing)} testing records")
    return training, testing


def to_arrays(records: Sequence[HouseBlockData]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Copy records into flat arrays.

    Returns:
        Tuple of (features [n, 8], labels [n]) as float32
    """
    features = np.array([r.get_features() for r in records], dtype=np.float32).reshape(-1, NUM_FEATURES)
    labels = np.array([r.get_label() for r in records], dtype=np.float32)
    return features, labels


class HousingDataset(Dataset):
    """Torch dataset over feature/label arrays."""

    def __init__(self, features: np.ndarray, labels: np.ndarray):
        if len(features) != len(labels):
            raise ValueError(
                f"features and labels differ in length: {len(features)} != {len(labels)}"
            )
        self.features = torch.as_tensor(features, dtype=torch.float32)
        self.labels = torch.as_tensor(labels, dtype=torch.float32).reshape(-1, 1)

    @classmethod
    def from_records(cls, records: Sequence[HouseBlockData]) -> "HousingDataset":
        return cls(*to_arrays(records))

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, idx: int) -> Dict[str, torch.Tensor]:
        return {
            'features': self.features[idx],
            'label': self.labels[idx],
        }


def create_data_loaders(train_dataset: HousingDataset,
                        test_dataset: HousingDataset,
                        batch_size: int = 16,
                        shuffle_train: bool = True,
                        seed: Optional[int] = None) -> Tuple[DataLoader, DataLoader]:
    """
    Create training and testing data loaders.

    The training loader reshuffles every epoch, the testing loader keeps
    record order. Both keep the final partial batch.
    """
    generator = None
    if seed is not None:
        generator = torch.Generator()
        generator.manual_seed(seed)

    train_loader = DataLoader(
        train_dataset,
        batch_size=batch_size,
        shuffle=shuffle_train,
        drop_last=False,
        generator=generator
    )
    test_loader = DataLoader(
        test_dataset,
        batch_size=batch_size,
        shuffle=False,
        drop_last=False
    )
    return train_loader, test_loader
