"""
Console Transcript Logger

Mirrors everything written to the console into a run transcript file.
Completed lines are buffered in memory and appended to the file in chunks,
so a crashed run still leaves most of its transcript on disk.

Author: House Price Prediction Project Team
License: MIT
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

logger = logging.getLogger(__name__)


class ConsoleLogger:
    """
    Line-buffered console logger that keeps a UTF-8 transcript of a run.

    Usage:
        with ConsoleLogger("Results", run_id) as console:
            console.write("partial ")
            console.write_line("line")
            chart_path = console.build_file_path(f"{run_id}_chart.html", delete_if_exists=True)
    """

    # Buffered lines are flushed once the buffer grows past this size
    FLUSH_THRESHOLD = 10

    def __init__(self,
                 root_path: Union[str, Path],
                 run_id: str,
                 stream: Optional[TextIO] = None):
        """
        Initialize the logger and prepare the transcript file.

        Args:
            root_path: Directory that receives the transcript
            run_id: Run identifier, used as the transcript file name
            stream: Console stream to mirror lines to (defaults to stdout)
        """
        self.stream = stream if stream is not None else sys.stdout

        self._output_file_path = (Path(root_path) / f"{run_id}.txt").resolve()
        self._output_dir = self._output_file_path.parent
        self._output_dir.mkdir(parents=True, exist_ok=True)

        if self._output_file_path.exists():
            self._output_file_path.unlink()
            logger.debug(f"Removed previous transcript {self._output_file_path}")

        self._lines: List[str] = []
        self._current_line: List[str] = []
        self._closed = False

        print(f"output: {self._output_file_path}", file=self.stream)

    @property
    def output_dir(self) -> Path:
        """Absolute directory holding the transcript and auxiliary outputs."""
        return self._output_dir

    @property
    def output_file_path(self) -> Path:
        """Absolute path of the transcript file."""
        return self._output_file_path

    def build_file_path(self, file_name: str, delete_if_exists: bool = False) -> Path:
        """
        Build an absolute path for an auxiliary output file.

        The parent directory of the returned path always exists.

        Args:
            file_name: File name, relative to the output directory
            delete_if_exists: Remove a pre-existing file at the path

        Returns:
            Absolute path of the output file
        """
        file_path = (self._output_dir / file_name).resolve()
        file_path.parent.mkdir(parents=True, exist_ok=True)

        if delete_if_exists and file_path.exists():
            file_path.unlink()
            logger.debug(f"Removed previous output file {file_path}")

        return file_path

    def write(self, text: Optional[str]) -> None:
        """Append text to the current line without terminating it."""
        self._check_open()
        self._current_line.append(text or "")

    def write_line(self, text: Optional[str] = "") -> None:
        """Append text, terminate the line and mirror it to console and transcript."""
        self._check_open()
        self._current_line.append(text or "")

        final_line = "".join(self._current_line)
        self._current_line = []

        print(final_line, file=self.stream)
        self._lines.append(final_line)

        if len(self._lines) > self.FLUSH_THRESHOLD:
            self.flush()

    def flush(self) -> None:
        """Append all buffered lines to the transcript file."""
        if not self._lines:
            return

        with open(self._output_file_path, 'a', encoding='utf-8') as f:
            for line in self._lines:
                f.write(line + "\n")

        logger.debug(f"Flushed {len(self._lines)} lines to {self._output_file_path}")
        self._lines = []

    def close(self) -> None:
        """Flush remaining output. Safe to call more than once."""
        if self._closed:
            return

        if any(self._current_line):
            self.write_line()
        self.flush()
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError(f"ConsoleLogger for {self._output_file_path} is closed")

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "ConsoleLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
