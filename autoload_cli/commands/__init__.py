"""CLI command groups for autoload-cli."""

__all__ = [
    "common",
    "mode",
    "override",
    "prefix",
    "resolve",
]
