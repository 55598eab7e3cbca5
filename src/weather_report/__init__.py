from .kernel import AppRuntime, build_runtime
from .ports import OutputSink, WeatherService
from .services import StubWeatherProvider
from .usecases import WeatherReporter

__all__ = ["AppRuntime", "OutputSink", "StubWeatherProvider", "WeatherReporter", "WeatherService", "build_runtime"]
