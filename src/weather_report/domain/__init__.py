from .weather import Location, WeatherReport

# Public domain exports keep imports explicit across layers.
__all__ = ["Location", "WeatherReport"]
