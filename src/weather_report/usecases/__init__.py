from .config_models import AdapterConfig, AppConfig, LoggingConfig, ReportConfig
from .weather_reporter import WeatherReporter

__all__ = ["AdapterConfig", "AppConfig", "LoggingConfig", "ReportConfig", "WeatherReporter"]
