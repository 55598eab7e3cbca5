from .output_sink import FileOutputSink, StreamOutputSink, output_file, output_stdout
from .registry import ROLES, AdapterRegistry, AdapterRegistryError, default_registry

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "ROLES",
    "AdapterRegistry",
    "AdapterRegistryError",
    "FileOutputSink",
    "StreamOutputSink",
    "default_registry",
    "output_file",
    "output_stdout",
]
