"""Validated domain primitives, use-case errors, settings checks and dataclass builders."""

__version__ = "0.1.0"
__all__ = ["builder", "errors", "optional", "primitives", "settings"]