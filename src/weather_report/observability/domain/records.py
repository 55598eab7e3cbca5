from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar

from weather_report.domain.weather import Location, WeatherReport

LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class ReportDelivered:
    """Diagnostic record for one weather report handed to the output sink.

    It carries the location asked for, the class name of the injected
    service and the report itself, so a log line shows which implementation
    produced which sentence.
    """

    event: ClassVar[str] = "weather_reported"

    location: Location
    service: str
    report: WeatherReport
    level: str = "info"
    at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"Unknown log level {self.level!r}; expected one of {LEVELS}")
        if not self.service:
            raise ValueError("ReportDelivered requires the reporting service name")

    @classmethod
    def for_service(cls, service: object, location: Location, report: WeatherReport) -> ReportDelivered:
        return cls(location=location, service=type(service).__name__, report=report)

    def to_payload(self) -> dict[str, object]:
        # Location may be empty; it is still logged as given.
        return {
            "event": self.event,
            "level": self.level,
            "at": self.at.astimezone(UTC).isoformat().replace("+00:00", "Z"),
            "location": self.location,
            "service": self.service,
            "report": self.report,
        }
