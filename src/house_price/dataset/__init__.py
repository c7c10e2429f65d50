"""
Housing data loading and batching.
"""

from .housing import (
    COLUMN_NAMES,
    HouseBlockData,
    HousingDataset,
    create_data_loaders,
    load_housing_csv,
    split_train_test,
    to_arrays,
)

__all__ = [
    "COLUMN_NAMES",
    "HouseBlockData",
    "HousingDataset",
    "create_data_loaders",
    "load_housing_csv",
    "split_train_test",
    "to_arrays",
]
