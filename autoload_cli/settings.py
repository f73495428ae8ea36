"""Settings manager for autoload settings.yaml files.

Manages three-scope settings system:
- User global (~/.autoload/settings.yaml)
- Project (.autoload/settings.yaml)
- Local (.autoload/settings.local.yaml)

Relative directories and files in a scope are resolved against the directory
that contains its ``.autoload`` folder.
"""

import logging
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import ValidationError

from .schema import AutoloadSettings

logger = logging.getLogger(__name__)

SettingsScope = Literal["user", "project", "local"]

# Lowest priority first
SCOPE_ORDER: tuple[SettingsScope, ...] = ("user", "project", "local")


class SettingsError(Exception):
    """A settings file exists but does not match the schema."""

    def __init__(self, path: Path, error: ValidationError):
        self.path = path
        self.error = error
        super().__init__(f"Invalid autoload settings in {path}:\n{error}")


class SettingsManager:
    """Manages settings across user/project/local scopes."""

    def __init__(self, autoload_dir: Path | None = None, user_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            autoload_dir: Base directory for project/local settings (for testing).
                          If None, uses .autoload in current directory.
            user_dir: Base directory for user settings (for testing).
                      If None, uses ~/.autoload.
        """
        if autoload_dir is None:
            autoload_dir = Path(".autoload")
        if user_dir is None:
            user_dir = Path.home() / ".autoload"

        self.user_settings_file = user_dir / "settings.yaml"
        self.project_settings_file = autoload_dir / "settings.yaml"
        self.local_settings_file = autoload_dir / "settings.local.yaml"

    def file_for_scope(self, scope: SettingsScope) -> Path:
        if scope == "user":
            return self.user_settings_file
        if scope == "project":
            return self.project_settings_file
        return self.local_settings_file

    def load_scope(self, scope: SettingsScope) -> AutoloadSettings | None:
        """Read and validate one scope, resolving relative paths.

        Returns:
            Settings for the scope, or None if its file does not exist

        Raises:
            SettingsError: File content does not match the schema
        """
        path = self.file_for_scope(scope)
        data = self._read_settings(path)
        if data is None:
            return None

        try:
            settings = AutoloadSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(path, e) from e

        root = path.parent.parent
        settings.prefixes = {
            prefix: [self._absolute(root, d) for d in dirs] for prefix, dirs in settings.prefix_dirs().items()
        }
        settings.overrides = {name: self._absolute(root, p) for name, p in settings.overrides.items()}
        if settings.search_path is not None:
            settings.search_path = [self._absolute(root, p) for p in settings.search_path]
        return settings

    def available_scopes(self) -> list[SettingsScope]:
        """Scopes backed by distinct files, lowest priority first.

        When run from the home directory the project file is the user file;
        it is then read once, as the user scope.
        """
        scopes: list[SettingsScope] = []
        seen: set[Path] = set()
        for scope in SCOPE_ORDER:
            path = self.file_for_scope(scope).expanduser().absolute()
            if path in seen:
                continue
            seen.add(path)
            scopes.append(scope)
        return scopes

    def load_all(self) -> list[tuple[SettingsScope, AutoloadSettings]]:
        """Load every existing scope, lowest priority first."""
        scopes = []
        for scope in self.available_scopes():
            settings = self.load_scope(scope)
            if settings is not None:
                scopes.append((scope, settings))
        return scopes

    def get_mode(self) -> str | None:
        """Get the configured mode.

        Resolution order:
        1. Local settings (settings.local.yaml) - highest priority
        2. Project settings (settings.yaml)
        3. User settings (~/.autoload/settings.yaml)
        4. None
        """
        for scope in reversed(SCOPE_ORDER):
            data = self._read_settings(self.file_for_scope(scope))
            if isinstance(data, dict) and data.get("mode"):
                return str(data["mode"])
        return None

    def set_mode(self, mode: str, scope: SettingsScope = "local") -> None:
        target_file = self.file_for_scope(scope)
        settings = self._read_settings(target_file) or {}
        settings["mode"] = mode
        self._write_settings(target_file, settings)
        logger.info(f"Set {scope} autoload mode to: {mode}")

    def add_prefix(self, prefix: str, directory: str, scope: SettingsScope = "project") -> None:
        """Append a directory for a prefix in one scope's file."""
        target_file = self.file_for_scope(scope)
        settings = self._read_settings(target_file) or {}
        prefixes = self._section(settings, "prefixes")

        existing = prefixes.get(prefix)
        if existing is None:
            prefixes[prefix] = directory
        elif isinstance(existing, str):
            if existing != directory:
                prefixes[prefix] = [existing, directory]
        elif directory not in existing:
            existing.append(directory)

        self._write_settings(target_file, settings)
        logger.info(f"Added {scope} prefix {prefix} -> {directory}")

    def set_override(self, name: str, path: str, scope: SettingsScope = "project") -> None:
        target_file = self.file_for_scope(scope)
        settings = self._read_settings(target_file) or {}
        self._section(settings, "overrides")[name] = path
        self._write_settings(target_file, settings)
        logger.info(f"Added {scope} override for {name}: {path}")

    def remove_override(self, name: str, scope: SettingsScope = "project") -> bool:
        """Remove an override from one scope.

        Returns:
            True if removed, False if not found
        """
        target_file = self.file_for_scope(scope)
        settings = self._read_settings(target_file) or {}
        overrides = self._section(settings, "overrides")

        if name not in overrides:
            return False

        del overrides[name]
        if not overrides:
            del settings["overrides"]

        self._write_settings(target_file, settings)
        logger.info(f"Removed {scope} override for {name}")
        return True

    def _section(self, settings: dict[str, Any], key: str) -> dict[str, Any]:
        """Mapping stored under ``key``; a missing or empty (``key:``) section becomes ``{}``."""
        section = settings.get(key)
        if section is None:
            section = settings[key] = {}
        return section

    def _absolute(self, root: Path, value: str) -> str:
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = root / path
        return str(path)

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Parsed YAML of one settings file.

        Returns:
            The parsed data ({} for an empty file), or None if the file is
            missing or cannot be parsed
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

    def _write_settings(self, path: Path, settings: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(settings, default_flow_style=False, sort_keys=False), encoding="utf-8")
