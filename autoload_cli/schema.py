"""Pydantic schemas for autoload settings files."""

from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

from .loader import Mode


class AutoloadSettings(BaseModel):
    """One scope's settings.yaml contents."""

    mode: Mode | None = Field(None, description="Operating mode: silent, normal or debug")
    prefixes: dict[str, str | list[str]] = Field(
        default_factory=dict, description="Symbol prefix -> directory or list of directories"
    )
    overrides: dict[str, str] = Field(default_factory=dict, description="Exact symbol name -> file path")
    search_path: list[str] | None = Field(None, description="Fallback roots (defaults to sys.path)")

    @field_validator("prefixes", "overrides", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        # A bare "prefixes:" line parses as None
        return {} if value is None else value

    def prefix_dirs(self) -> dict[str, list[str]]:
        """Prefixes with every value normalized to a list."""
        return {prefix: [dirs] if isinstance(dirs, str) else list(dirs) for prefix, dirs in self.prefixes.items()}
