from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from weather_report.domain.weather import WeatherReport
from weather_report.ports.output_sink import OutputSink


@dataclass
class StreamOutputSink(OutputSink):
    # Text-stream OutputSink; defaults to whatever sys.stdout is at write time.
    stream: TextIO | None = None

    def write_report(self, report: WeatherReport) -> None:
        target = self.stream if self.stream is not None else sys.stdout
        target.write(report + "\n")

    def close(self) -> None:
        # The stream is borrowed, never owned: flush only.
        target = self.stream if self.stream is not None else sys.stdout
        target.flush()


@dataclass
class FileOutputSink(OutputSink):
    # File-based OutputSink adapter.
    path: Path
    encoding: str = "utf-8"
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    def write_report(self, report: WeatherReport) -> None:
        # Open lazily so construction does not touch filesystem.
        if self._handle is None:
            self._handle = self.path.open("w", encoding=self.encoding)
        self._handle.write(report + "\n")

    def close(self) -> None:
        # Close is idempotent; safe to call multiple times.
        if self._handle is None:
            return
        self._handle.flush()
        self._handle.close()
        self._handle = None


def output_stdout(settings: dict[str, object]) -> StreamOutputSink:
    _ = settings
    return StreamOutputSink()


def output_file(settings: dict[str, object]) -> FileOutputSink:
    # Factory for file-based output sink.
    path = settings.get("path")
    if not isinstance(path, str) or not path:
        raise ValueError("output_file.settings.path must be a non-empty string")
    encoding = settings.get("encoding", "utf-8")
    if not isinstance(encoding, str) or not encoding:
        raise ValueError("output_file.settings.encoding must be a non-empty string")
    return FileOutputSink(Path(path), encoding=encoding)
