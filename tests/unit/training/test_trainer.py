"""
Test suite for the training configuration and HousePriceTrainer.
"""

import io

import numpy as np
import pytest
import torch

from house_price.dataset.housing import HousingDataset, create_data_loaders
from house_price.metrics.writer import TrainingMetricsWriter
from house_price.models.regressor import HousePriceNet
from house_price.training import HousePriceTrainer, TrainingConfig
from house_price.training.regression_trainer import TABLE_HEADER
from house_price.utils.console_logger import ConsoleLogger


class ZeroModel(torch.nn.Module):
    """Predicts zero for every sample."""

    def __init__(self):
        super().__init__()
        self.dummy = torch.nn.Parameter(torch.zeros(1))

    def forward(self, x):
        return torch.zeros(x.size(0), 1) * self.dummy


@pytest.fixture
def loaders():
    rng = np.random.default_rng(0)
    features = rng.normal(size=(40, 8)).astype(np.float32)
    labels = (features.sum(axis=1) * 10 + 200).astype(np.float32)
    dataset = HousingDataset(features, labels)
    return create_data_loaders(dataset, HousingDataset(features[:10], labels[:10]), batch_size=16, seed=0)


@pytest.fixture
def config():
    return TrainingConfig(epochs=3, batch_size=16, device='cpu', seed=0)


class TestTrainingConfig:

    def test_defaults_match_reference_run(self):
        config = TrainingConfig()

        assert config.epochs == 50
        assert config.batch_size == 16
        assert config.learning_rate == 0.001
        assert config.test_fraction == 0.2
        assert config.optimizer_type == "adam"

    @pytest.mark.parametrize("kwargs", [
        {'epochs': 0},
        {'batch_size': -4},
        {'learning_rate': 0.0},
        {'test_fraction': 1.0},
        {'optimizer_type': 'rmsprop'},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            TrainingConfig(**kwargs)

    def test_from_dict(self):
        config = TrainingConfig.from_dict({'epochs': 5, 'betas': [0.8, 0.99]})

        assert config.epochs == 5
        assert config.betas == (0.8, 0.99)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="epoch_count"):
            TrainingConfig.from_dict({'epoch_count': 5})


class TestHousePriceTrainer:

    @pytest.mark.parametrize("optimizer_type,expected", [
        ("adam", torch.optim.Adam),
        ("adamw", torch.optim.AdamW),
        ("SGD", torch.optim.SGD),
    ])
    def test_optimizer_selection(self, loaders, optimizer_type, expected):
        config = TrainingConfig(epochs=1, device='cpu', optimizer_type=optimizer_type)

        trainer = HousePriceTrainer(HousePriceNet(), config, *loaders)

        assert isinstance(trainer.optimizer, expected)

    def test_history_has_one_entry_per_epoch(self, loaders, config):
        trainer = HousePriceTrainer(HousePriceNet(), config, *loaders)

        history = trainer.train()

        assert set(history) == {'loss', 'train_error', 'test_error'}
        for values in history.values():
            assert len(values) == 3
            assert all(np.isfinite(values))
        assert trainer.final_test_error == history['test_error'][-1]

    def test_training_reduces_loss(self, loaders):
        config = TrainingConfig(epochs=30, batch_size=16, learning_rate=0.01, device='cpu')
        trainer = HousePriceTrainer(HousePriceNet(), config, *loaders)

        history = trainer.train()

        assert history['loss'][-1] < history['loss'][0]

    def test_train_epoch_updates_parameters(self, loaders, config):
        model = HousePriceNet()
        before = [p.detach().clone() for p in model.parameters()]
        trainer = HousePriceTrainer(model, config, *loaders)

        metrics = trainer.train_epoch()

        assert set(metrics) == {'loss', 'train_error'}
        assert any(not torch.equal(b, a) for b, a in zip(before, model.parameters()))

    def test_test_epoch_does_not_update_parameters(self, loaders, config):
        model = HousePriceNet()
        trainer = HousePriceTrainer(model, config, *loaders)
        before = [p.detach().clone() for p in model.parameters()]

        metrics = trainer.test_epoch()

        assert metrics['test_error'] >= 0
        assert all(torch.equal(b, a) for b, a in zip(before, model.parameters()))

    def test_test_error_is_mean_absolute_error_over_batches(self, config):
        features = np.zeros((4, 8), dtype=np.float32)
        labels = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32)
        dataset = HousingDataset(features, labels)
        train_loader, test_loader = create_data_loaders(dataset, dataset, batch_size=2)

        trainer = HousePriceTrainer(ZeroModel(), config, train_loader, test_loader)

        # batches [1, 2] and [3, 4] -> mean of 1.5 and 3.5
        assert trainer.test_epoch()['test_error'] == pytest.approx(2.5)

    def test_missing_test_loader_reports_nan(self, loaders, config):
        trainer = HousePriceTrainer(HousePriceNet(), config, loaders[0])

        history = trainer.train()

        assert all(np.isnan(history['test_error']))

    def test_final_test_error_before_training_raises(self, loaders, config):
        trainer = HousePriceTrainer(HousePriceNet(), config, *loaders)

        with pytest.raises(RuntimeError):
            trainer.final_test_error

    def test_epoch_table_written_to_console(self, loaders, config, temp_dir):
        stream = io.StringIO()
        with ConsoleLogger(temp_dir, "table", stream=stream) as console:
            trainer = HousePriceTrainer(HousePriceNet(), config, *loaders, console=console)
            history = trainer.train()

        lines = (temp_dir / "table.txt").read_text(encoding='utf-8').splitlines()

        assert tuple(lines[:3]) == TABLE_HEADER
        rows = lines[3:6]
        for epoch, row in enumerate(rows):
            cells = row.split("\t")
            assert cells[0] == f"{epoch:5}"
            assert len(cells) == 4
            assert all(len(cell) == 10 for cell in cells[1:])
            assert float(cells[3]) == pytest.approx(history['test_error'][epoch], abs=1e-3)
        assert lines[6].startswith("model training done (epochs=3, batchSize=16): training time: ")
        assert lines[7] == ""

    def test_metrics_writer_receives_each_epoch(self, loaders, config, temp_dir):
        writer = TrainingMetricsWriter(temp_dir / "metrics.csv")
        trainer = HousePriceTrainer(HousePriceNet(), config, *loaders, metrics_writer=writer)

        trainer.train()

        assert [row['epoch'] for row in writer.rows] == [0, 1, 2]
        assert (temp_dir / "metrics.json").exists()
