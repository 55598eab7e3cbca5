from __future__ import annotations

from typing import Protocol, runtime_checkable

from weather_report.domain.weather import Location, WeatherReport


# WeatherService port is the only contract WeatherReporter depends on.
@runtime_checkable
class WeatherService(Protocol):
    def get_weather(self, location: Location) -> WeatherReport:
        """Return a human-readable weather sentence for location."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("WeatherService is a port; use a concrete adapter.")
