from __future__ import annotations

import json
from pathlib import Path

import pytest

from weather_report.adapters.output_sink import FileOutputSink, StreamOutputSink
from weather_report.adapters.registry import AdapterRegistry, AdapterRegistryError, default_registry
from weather_report.kernel.composition_root import WiringError, build_runtime
from weather_report.observability.adapters.json_lines import JsonLinesLogSink
from weather_report.services.weather_provider import StubWeatherProvider
from weather_report.usecases.config_models import AppConfig


def _config(**overrides: object) -> AppConfig:
    raw: dict[str, object] = {
        "version": 1,
        "report": {"location": "Paris"},
        "weather_service": {"kind": "stub"},
        "output": {"kind": "stdout"},
    }
    raw.update(overrides)
    return AppConfig.model_validate(raw)


def test_build_runtime_wires_default_adapters() -> None:
    runtime = build_runtime(config=_config())
    assert isinstance(runtime.reporter.service, StubWeatherProvider)
    assert isinstance(runtime.output_sink, StreamOutputSink)
    assert runtime.reporter.sink is runtime.output_sink
    assert runtime.reporter.log_sink is None
    assert runtime.location == "Paris"


def test_build_runtime_reports_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    runtime = build_runtime(config=_config())
    runtime.reporter.report_weather(runtime.location)
    runtime.output_sink.close()
    assert capsys.readouterr().out == "Temps ensoleillé à Paris\n"


def test_build_runtime_file_output_and_template(tmp_path: Path) -> None:
    out = tmp_path / "report.txt"
    runtime = build_runtime(
        config=_config(
            report={"location": "Nice"},
            weather_service={"kind": "stub", "settings": {"template": "Soleil sur {location}"}},
            output={"kind": "file", "settings": {"path": str(out)}},
        )
    )
    assert isinstance(runtime.output_sink, FileOutputSink)
    runtime.reporter.report_weather(runtime.location)
    runtime.output_sink.close()
    assert out.read_text(encoding="utf-8") == "Soleil sur Nice\n"


def test_build_runtime_wires_log_sink_when_enabled(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "run.jsonl"
    runtime = build_runtime(
        config=_config(logging={"enabled": True, "kind": "jsonl", "settings": {"path": str(log_path)}})
    )
    assert isinstance(runtime.log_sink, JsonLinesLogSink)
    runtime.reporter.report_weather("Paris")
    runtime.log_sink.close()
    record = json.loads(log_path.read_text(encoding="utf-8").strip())
    assert record["event"] == "weather_reported"
    assert record["location"] == "Paris"


def test_build_runtime_accepts_custom_registry() -> None:
    # A substituted service is injected without touching reporter code.
    class _Foggy:
        def get_weather(self, location: str) -> str:
            return f"Fog in {location}"

    registry = default_registry()
    registry.register("weather_service", "foggy", lambda settings: _Foggy())
    runtime = build_runtime(config=_config(weather_service={"kind": "foggy"}), registry=registry)
    assert runtime.reporter.service.get_weather("Caen") == "Fog in Caen"


def test_build_runtime_rejects_adapter_not_matching_port() -> None:
    registry = AdapterRegistry()
    registry.register("weather_service", "stub", lambda settings: object())
    registry.register("output", "stdout", lambda settings: StreamOutputSink())
    with pytest.raises(WiringError, match="WeatherService"):
        build_runtime(config=_config(), registry=registry)


def test_build_runtime_unknown_kind_fails() -> None:
    with pytest.raises(AdapterRegistryError):
        build_runtime(config=_config(output={"kind": "printer"}))


def test_build_runtime_rejects_attribute_template_as_value_error() -> None:
    # Template errors reach callers as ValueError, not AttributeError.
    config = _config(weather_service={"kind": "stub", "settings": {"template": "Sunny in {location.city}"}})
    with pytest.raises(ValueError):
        build_runtime(config=config)
