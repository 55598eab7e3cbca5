from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class ReportConfig(BaseModel):
    # Location reported when the CLI does not override it; empty text is valid.
    model_config = ConfigDict(extra="forbid")
    location: str = "Paris"


class AdapterConfig(BaseModel):
    # Adapter declaration: registry kind plus factory settings.
    model_config = ConfigDict(extra="forbid")
    kind: str
    settings: dict[str, Any] = Field(default_factory=dict)


class LoggingConfig(AdapterConfig):
    # Logging is opt-in so the report line stays the only default output.
    enabled: bool = False
    kind: str = "stderr"

    @model_validator(mode="after")
    def _require_jsonl_path(self) -> LoggingConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.enabled and self.kind == "jsonl" and not self.settings.get("path"):
            raise ValueError("logging.settings.path is required when kind is 'jsonl'")
        return self


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    version: Literal[1]
    report: ReportConfig
    weather_service: AdapterConfig
    output: AdapterConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
