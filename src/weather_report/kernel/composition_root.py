from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from weather_report.adapters.registry import AdapterRegistry, default_registry
from weather_report.domain.weather import Location
from weather_report.ports.log_sink import LogSink
from weather_report.ports.output_sink import OutputSink
from weather_report.ports.weather_service import WeatherService
from weather_report.usecases.config_models import AppConfig
from weather_report.usecases.weather_reporter import WeatherReporter

T = TypeVar("T")


class WiringError(TypeError):
    # Raised when a built adapter does not satisfy the port it is wired into.
    pass


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # AppRuntime bundles the wired reporter with the resources the caller must release.
    reporter: WeatherReporter
    output_sink: OutputSink
    location: Location
    log_sink: LogSink | None = None


def build_runtime(*, config: AppConfig, registry: AdapterRegistry | None = None) -> AppRuntime:
    # The only place where concrete adapters are chosen and injected.
    registry = registry if registry is not None else default_registry()

    service = _require(
        WeatherService,
        registry.build("weather_service", config.weather_service.kind, config.weather_service.settings),
        role="weather_service",
    )
    output_sink = _require(
        OutputSink,
        registry.build("output", config.output.kind, config.output.settings),
        role="output",
    )
    log_sink: LogSink | None = None
    if config.logging.enabled:
        log_sink = _require(
            LogSink,
            registry.build("log", config.logging.kind, config.logging.settings),
            role="log",
        )

    reporter = WeatherReporter(service=service, sink=output_sink, log_sink=log_sink)
    return AppRuntime(
        reporter=reporter,
        output_sink=output_sink,
        location=config.report.location,
        log_sink=log_sink,
    )


def _require(port: type[T], candidate: object, *, role: str) -> T:
    # runtime_checkable ports only verify method presence, which is what wiring needs.
    if not isinstance(candidate, port):
        raise WiringError(
            f"Adapter for role {role} ({type(candidate).__name__}) does not implement {port.__name__}"
        )
    return candidate
