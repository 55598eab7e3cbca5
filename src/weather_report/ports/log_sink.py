from __future__ import annotations

from typing import Protocol, runtime_checkable

from weather_report.observability.domain.records import ReportDelivered


# LogSink receives diagnostics about delivered reports; it never sees the report channel.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, record: ReportDelivered) -> None:
        """Record that one report was delivered."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release any file held by the sink; a no-op for borrowed streams."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
