from .log_sink import LogSink
from .output_sink import OutputSink
from .weather_service import WeatherService

# Public port exports keep wiring explicit at composition time.
__all__ = ["LogSink", "OutputSink", "WeatherService"]
