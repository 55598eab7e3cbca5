from __future__ import annotations

from dataclasses import dataclass

from weather_report.domain.weather import Location
from weather_report.observability.domain.records import ReportDelivered
from weather_report.ports.log_sink import LogSink
from weather_report.ports.output_sink import OutputSink
from weather_report.ports.weather_service import WeatherService


@dataclass(frozen=True, slots=True)
class WeatherReporter:
    """Report the weather for a location through an injected WeatherService.

    The reporter never builds its collaborators: the service, the output sink
    and the optional log sink are supplied by the caller (normally the
    composition root) and fixed for the reporter's lifetime.
    """

    service: WeatherService
    sink: OutputSink
    log_sink: LogSink | None = None

    def report_weather(self, location: Location) -> None:
        # Service errors propagate unchanged; the reporter adds no policy.
        report = self.service.get_weather(location)
        self.sink.write_report(report)
        if self.log_sink is not None:
            self.log_sink.emit(ReportDelivered.for_service(self.service, location, report))
