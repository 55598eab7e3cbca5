from __future__ import annotations

from typing import Protocol, runtime_checkable

from weather_report.domain.weather import WeatherReport


# OutputSink is where a finished weather report is delivered, one report per line.
@runtime_checkable
class OutputSink(Protocol):
    def write_report(self, report: WeatherReport) -> None:
        """Deliver one report; the adapter terminates it with a newline."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush delivered reports and release owned resources."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
