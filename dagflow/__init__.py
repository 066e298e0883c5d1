"""Tasks with dependencies, their inputs and outputs, and YAML task configuration parsing."""

__version__ = "0.5.0"

__all__ = [
    "action",
    "cmd",
    "env",
    "errors",
    "parser",
    "state",
    "task",
    "yaml_parser",
]