from .weather_provider import DEFAULT_TEMPLATE, StubWeatherProvider, weather_service_stub

__all__ = ["DEFAULT_TEMPLATE", "StubWeatherProvider", "weather_service_stub"]
