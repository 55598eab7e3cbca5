from __future__ import annotations

from collections.abc import Callable, Mapping

AdapterFactory = Callable[[dict[str, object]], object]

# Every pluggable collaborator of the reporter, named as in the config file.
ROLES = ("weather_service", "output", "log")


class AdapterRegistryError(ValueError):
    # Raised when a role or kind cannot be resolved to a factory.
    pass


class AdapterRegistry:
    """Factories for the reporter's collaborators, grouped by role.

    A role is a port (``weather_service``, ``output``, ``log``); a kind is the
    name a config file uses to pick one implementation of it.
    """

    def __init__(self) -> None:
        self._by_role: dict[str, dict[str, AdapterFactory]] = {role: {} for role in ROLES}

    def register(self, role: str, kind: str, factory: AdapterFactory) -> None:
        factories = self._factories_for(role)
        if kind in factories:
            raise AdapterRegistryError(f"{role} kind {kind!r} is already registered")
        factories[kind] = factory

    def build(self, role: str, kind: str, settings: Mapping[str, object] | None = None) -> object:
        factory = self._factories_for(role).get(kind)
        if factory is None:
            raise AdapterRegistryError(
                f"Unknown {role} kind {kind!r}; registered kinds: {', '.join(self.kinds(role)) or 'none'}"
            )
        # Factories get a private copy so they cannot mutate the loaded config.
        return factory(dict(settings or {}))

    def kinds(self, role: str) -> list[str]:
        return sorted(self._factories_for(role))

    def _factories_for(self, role: str) -> dict[str, AdapterFactory]:
        if role not in self._by_role:
            raise AdapterRegistryError(f"Unknown adapter role {role!r}; expected one of {ROLES}")
        return self._by_role[role]


def default_registry() -> AdapterRegistry:
    # Built-in adapters available to the composition root.
    from weather_report.adapters.output_sink import output_file, output_stdout
    from weather_report.observability.adapters.json_lines import log_jsonl, log_stderr
    from weather_report.services.weather_provider import weather_service_stub

    registry = AdapterRegistry()
    registry.register("weather_service", "stub", weather_service_stub)
    registry.register("output", "stdout", output_stdout)
    registry.register("output", "file", output_file)
    registry.register("log", "stderr", log_stderr)
    registry.register("log", "jsonl", log_jsonl)
    return registry
