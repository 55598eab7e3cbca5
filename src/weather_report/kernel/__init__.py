from .composition_root import AppRuntime, WiringError, build_runtime

# Kernel exports are minimal and runtime-focused.
__all__ = ["AppRuntime", "WiringError", "build_runtime"]
