from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from weather_report.observability.domain.records import ReportDelivered
from weather_report.ports.log_sink import LogSink


class JsonLinesLogSink(LogSink):
    # One JSON object per record, written either to a borrowed stream or to an owned file.
    def __init__(self, *, path: Path | None = None, stream: TextIO | None = None) -> None:
        if path is not None and stream is not None:
            raise ValueError("JsonLinesLogSink takes a path or a stream, not both")
        self._path = path
        self._stream = stream
        self._handle: TextIO | None = None

    @property
    def owns_file(self) -> bool:
        return self._path is not None

    def emit(self, record: ReportDelivered) -> None:
        target = self._target()
        target.write(json.dumps(record.to_payload(), separators=(",", ":"), ensure_ascii=False) + "\n")
        target.flush()

    def close(self) -> None:
        # Borrowed streams (stderr by default) are left open.
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None

    def _target(self) -> TextIO:
        if self._path is None:
            # Resolved per call so a redirected stderr is honored; stdout is reserved for reports.
            return self._stream if self._stream is not None else sys.stderr
        if self._handle is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self._path.open("a", encoding="utf-8")
        return self._handle


def log_stderr(settings: dict[str, object]) -> JsonLinesLogSink:
    _ = settings
    return JsonLinesLogSink()


def log_jsonl(settings: dict[str, object]) -> JsonLinesLogSink:
    # Appends to the configured file so repeated runs accumulate a history.
    path = settings.get("path")
    if not isinstance(path, str) or not path:
        raise ValueError("log_jsonl.settings.path must be a non-empty string")
    return JsonLinesLogSink(path=Path(path))
