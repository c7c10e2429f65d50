"""
TrainingMetricsWriter - per-epoch metrics recording.

Saves loss, training error and testing error of each epoch to CSV, plus a
JSON summary of the final epoch, so curves can be re-plotted without
re-training.
"""

import csv
import json
import math
import time
from pathlib import Path
from typing import Dict, List, Tuple, Union

METRIC_NAMES = ("loss", "train_error", "test_error")


class TrainingMetricsWriter:
    """
    Records epoch-level metrics to a CSV file and a JSON summary.

    Any existing CSV at the target path is replaced when the writer is created.
    Each row is written through a temporary file that is then renamed over
    the CSV, so the file on disk is always complete.
    """

    def __init__(
        self,
        csv_path: Union[str, Path],
        json_path: Union[str, Path, None] = None,
        metrics: Tuple[str, ...] = METRIC_NAMES,
    ):
        """
        Initialize TrainingMetricsWriter.

        Args:
            csv_path: Path of the CSV output file
            json_path: Path of the JSON summary (defaults to CSV path with .json suffix)
            metrics: Metric names recorded per epoch
        """
        self.csv_path = Path(csv_path)
        self.json_path = Path(json_path) if json_path is not None else self.csv_path.with_suffix('.json')
        self.metrics = metrics
        self.fieldnames = ['epoch'] + list(self.metrics) + ['wall_time']

        self._rows: List[Dict[str, float]] = []

        self.csv_path.parent.mkdir(parents=True, exist_ok=True)
        self._write_csv()

    def record_epoch(self, epoch: int, metrics_data: Dict[str, float]) -> None:
        """
        Record metrics for one epoch.

        Missing metrics are written as NaN.
        """
        row = {
            'epoch': epoch,
            'wall_time': time.time(),
        }
        for metric in self.metrics:
            row[metric] = float(metrics_data.get(metric, float('nan')))

        self._rows.append(row)
        self._write_csv()

    @property
    def rows(self) -> List[Dict[str, float]]:
        return list(self._rows)

    def _write_csv(self) -> None:
        """Rewrite the CSV through a temporary file."""
        temp_path = self.csv_path.with_suffix('.tmp')

        try:
            with open(temp_path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.DictWriter(f, fieldnames=self.fieldnames)
                writer.writeheader()
                for row in self._rows:
                    writer.writerow(row)

            temp_path.replace(self.csv_path)

        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise RuntimeError(f"Failed to write metrics CSV: {e}") from e

    def save_summary(self, total_epochs: int) -> None:
        """Save a JSON summary with the metrics of the last recorded epoch."""
        final_metrics = {}
        if self._rows:
            last_row = self._rows[-1]
            final_metrics = {
                metric: None if math.isnan(last_row[metric]) else last_row[metric]
                for metric in self.metrics
            }

        summary = {
            'experiment_info': {
                'total_epochs': total_epochs,
                'metrics_tracked': list(self.metrics),
                'completed_at': time.time(),
            },
            'final_metrics': final_metrics,
            'files': {
                'csv_path': str(self.csv_path),
                'json_path': str(self.json_path),
            }
        }

        temp_json = self.json_path.with_suffix('.tmp')
        with open(temp_json, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2)
        temp_json.replace(self.json_path)
