"""
Test suite for housing data loading, splitting and batching.
"""

import numpy as np
import pytest
import torch

from fixtures.sample_data import HEADER, write_housing_csv
from house_price.dataset.housing import (
    COLUMN_NAMES,
    HouseBlockData,
    HousingDataset,
    create_data_loaders,
    load_housing_csv,
    split_train_test,
    to_arrays,
)


@pytest.fixture
def record():
    return HouseBlockData(
        longitude=-122.23,
        latitude=37.88,
        housing_median_age=41.0,
        total_rooms=880.0,
        total_bedrooms=129.0,
        population=322.0,
        households=126.0,
        median_income=8.3252,
        median_house_value=452600.0,
    )


class TestHouseBlockData:

    def test_features_are_eight_values_in_column_order(self, record):
        features = record.get_features()

        assert len(features) == 8
        assert features == [-122.23, 37.88, 41.0, 880.0, 129.0, 322.0, 126.0, 8.3252]

    def test_features_exclude_label(self, record):
        assert record.median_house_value not in record.get_features()

    def test_label_is_value_in_thousands(self, record):
        assert record.get_label() == pytest.approx(452.6)

    def test_field_order_matches_csv_columns(self):
        assert tuple(HouseBlockData.__dataclass_fields__) == COLUMN_NAMES


class TestLoadHousingCsv:

    def test_loads_all_rows(self, housing_csv):
        records = load_housing_csv(housing_csv)

        assert len(records) == 120
        assert all(isinstance(r, HouseBlockData) for r in records)

    def test_columns_are_read_by_position(self, temp_dir):
        path = temp_dir / "renamed.csv"
        path.write_text(
            "a,b,c,d,e,f,g,h,i\n"
            "-122.23,37.88,41,880,129,322,126,8.3252,452600\n",
            encoding='utf-8'
        )

        records = load_housing_csv(path)

        assert records[0].longitude == pytest.approx(-122.23)
        assert records[0].median_house_value == pytest.approx(452600.0)

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_housing_csv(temp_dir / "missing.csv")

    def test_wrong_column_count_raises(self, temp_dir):
        path = temp_dir / "short.csv"
        path.write_text("a,b,c\n1,2,3\n", encoding='utf-8')

        with pytest.raises(ValueError, match="Expected 9 columns"):
            load_housing_csv(path)

    def test_non_numeric_value_raises(self, temp_dir):
        path = temp_dir / "text.csv"
        path.write_text(
            HEADER + "\n"
            "-122.23,37.88,41,880,129,322,126,8.3252,452600\n"
            "-122.22,37.86,21,7099,1106,2401,1138,8.3014,NEAR BAY\n",
            encoding='utf-8'
        )

        with pytest.raises(ValueError):
            load_housing_csv(path)

    def test_empty_field_raises(self, temp_dir):
        path = temp_dir / "gap.csv"
        path.write_text(
            HEADER + "\n"
            "-122.23,37.88,41,880,129,322,126,8.3252,452600\n"
            "-122.22,37.86,21,7099,,2401,1138,8.3014,358500\n",
            encoding='utf-8'
        )

        with pytest.raises(ValueError, match="line 3"):
            load_housing_csv(path)


class TestSplitAndArrays:

    def test_split_sizes(self, housing_csv):
        records = load_housing_csv(housing_csv)

        training, testing = split_train_test(records, test_fraction=0.2, seed=0)

        assert len(training) == 96
        assert len(testing) == 24

    def test_split_is_a_partition(self, housing_csv):
        records = load_housing_csv(housing_csv)

        training, testing = split_train_test(records, seed=1)

        ids = sorted(id(r) for r in training + testing)
        assert ids == sorted(id(r) for r in records)

    def test_split_is_reproducible_with_seed(self, housing_csv):
        records = load_housing_csv(housing_csv)

        first = split_train_test(records, seed=7)
        second = split_train_test(records, seed=7)

        assert first == second

    @pytest.mark.parametrize("fraction", [0.0, 1.0, -0.1, 1.5])
    def test_invalid_fraction_raises(self, housing_csv, fraction):
        records = load_housing_csv(housing_csv)

        with pytest.raises(ValueError):
            split_train_test(records, test_fraction=fraction)

    def test_to_arrays_shapes_and_scaling(self, record):
        features, labels = to_arrays([record, record])

        assert features.shape == (2, 8)
        assert labels.shape == (2,)
        assert features.dtype == np.float32
        assert labels[0] == pytest.approx(452.6)

    def test_to_arrays_empty(self):
        features, labels = to_arrays([])

        assert features.shape == (0, 8)
        assert labels.shape == (0,)


class TestHousingDataset:

    def test_items(self, record):
        dataset = HousingDataset.from_records([record] * 3)

        assert len(dataset) == 3
        item = dataset[0]
        assert item['features'].shape == (8,)
        assert item['label'].shape == (1,)
        assert item['features'].dtype == torch.float32

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            HousingDataset(np.zeros((3, 8)), np.zeros(2))

    def test_loaders_batch_sizes(self, temp_dir):
        records = load_housing_csv(write_housing_csv(temp_dir / "h.csv", num_samples=50))
        training, testing = split_train_test(records, seed=0)

        train_loader, test_loader = create_data_loaders(
            HousingDataset.from_records(training),
            HousingDataset.from_records(testing),
            batch_size=16,
            seed=0
        )

        train_sizes = [len(batch['label']) for batch in train_loader]
        assert train_sizes == [16, 16, 8]
        test_sizes = [len(batch['label']) for batch in test_loader]
        assert test_sizes == [10]

    def test_test_loader_keeps_order(self):
        records = [HouseBlockData(*([float(i)] * 9)) for i in range(5)]
        dataset = HousingDataset.from_records(records)

        _, test_loader = create_data_loaders(dataset, dataset, batch_size=2)

        first_features = torch.cat([batch['features'][:, 0] for batch in test_loader])
        assert first_features.tolist() == [0.0, 1.0, 2.0, 3.0, 4.0]

    def test_train_loader_reshuffles(self):
        records = [HouseBlockData(*([float(i)] * 9)) for i in range(64)]
        dataset = HousingDataset.from_records(records)

        train_loader, _ = create_data_loaders(dataset, dataset, batch_size=64, seed=3)

        first = next(iter(train_loader))['features'][:, 0].tolist()
        second = next(iter(train_loader))['features'][:, 0].tolist()
        assert sorted(first) == [float(i) for i in range(64)]
        assert first != second
