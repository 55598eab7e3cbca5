from __future__ import annotations

from dataclasses import dataclass
from string import Formatter

from weather_report.domain.weather import Location, WeatherReport
from weather_report.ports.weather_service import WeatherService

DEFAULT_TEMPLATE = "Temps ensoleillé à {location}"


@dataclass(frozen=True, slots=True)
class StubWeatherProvider(WeatherService):
    # Stubbed provider: formats a fixed sentence, performs no I/O.
    template: str = DEFAULT_TEMPLATE

    def __post_init__(self) -> None:
        # Fail at construction rather than on the first report.
        _check_template(self.template)

    def get_weather(self, location: Location) -> WeatherReport:
        # Substituted value is not re-parsed, so braces in location stay verbatim.
        return self.template.format(location=location)


def _check_template(template: str) -> None:
    # Every replacement field must be a bare {location}: no conversion, format spec,
    # attribute or index access, so the location always lands in the report unchanged.
    try:
        fields = [
            (name, spec, conversion)
            for _, name, spec, conversion in Formatter().parse(template)
            if name is not None
        ]
    except ValueError as exc:
        raise ValueError(f"weather template is malformed: {template!r}") from exc
    if not fields:
        raise ValueError(f"weather template must reference {{location}}: {template!r}")
    for name, spec, conversion in fields:
        if name != "location" or spec or conversion is not None:
            raise ValueError(
                f"weather template fields must be a plain {{location}}, got {{{name}}} in {template!r}"
            )


def weather_service_stub(settings: dict[str, object]) -> StubWeatherProvider:
    # Factory for the stub provider; template is optional.
    template = settings.get("template", DEFAULT_TEMPLATE)
    if not isinstance(template, str):
        raise ValueError("weather_service_stub.settings.template must be a string")
    return StubWeatherProvider(template=template)
