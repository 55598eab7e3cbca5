from __future__ import annotations

# Location is free text naming a place; no validation or normalization is applied.
Location = str

# WeatherReport is the human-readable sentence produced for one Location.
WeatherReport = str
