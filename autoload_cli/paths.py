"""CLI path policy and dependency injection helpers.

This module centralizes the CLI's decisions about where settings live and
how a configured Loader is assembled from them. Library classes receive
paths and capabilities via injection; this module provides the CLI's choices.
"""

import logging
import os
from pathlib import Path
from typing import Literal

from .host import FileSystem
from .host import HostProtocol
from .host import SymbolHost
from .loader import Loader
from .loader import Mode
from .settings import SettingsManager
from .settings import SettingsScope

logger = logging.getLogger(__name__)

# Type alias for scope names used in CLI
ScopeType = Literal["local", "project", "global"]

# Map CLI scope names to settings scopes
_SCOPE_MAP: dict[ScopeType, SettingsScope] = {
    "local": "local",
    "project": "project",
    "global": "user",
}

MODE_ENV = "AUTOLOAD_MODE"


def is_running_from_home() -> bool:
    """Check if running from the home directory.

    Returns:
        True if cwd is the user's home directory
    """
    return Path.cwd() == Path.home()


class ScopeNotAvailableError(Exception):
    """Raised when a write targets a scope that is disabled from the current directory."""

    def __init__(self, scope: ScopeType):
        self.scope = scope
        super().__init__(
            f"The '{scope}' scope is not available when running from your home directory.\n"
            f"Use --global, or run from a project directory."
        )


def get_effective_scope(scope: ScopeType | None, default: ScopeType = "project") -> SettingsScope:
    """Map a CLI scope flag to a settings scope, validating it for writes.

    Raises:
        ScopeNotAvailableError: Project/local scope requested from the home directory
    """
    chosen = scope or default
    if chosen != "global" and is_running_from_home():
        if scope is None:
            logger.debug(f"Scope '{chosen}' unavailable from home directory, using global")
            return "user"
        raise ScopeNotAvailableError(chosen)
    return _SCOPE_MAP[chosen]


def get_autoload_dir() -> Path:
    """Project settings directory (.autoload in the current directory)."""
    return Path.cwd() / ".autoload"


def create_settings_manager() -> SettingsManager:
    return SettingsManager(autoload_dir=get_autoload_dir())


def create_loader(
    host: HostProtocol | None = None,
    mode: Mode | str | None = None,
    settings: SettingsManager | None = None,
) -> Loader:
    """Create a Loader configured from all settings scopes.

    Prefixes from every scope are layered additively (user, then project,
    then local). Overrides are merged with later scopes winning and then
    installed as one table. Mode comes from the ``mode`` argument, then
    ``AUTOLOAD_MODE``, then the highest scope that sets it.

    Args:
        host: Symbol host (a fresh SymbolHost if None)
        mode: Explicit operating mode
        settings: Settings manager (standard paths if None)

    Returns:
        Loader ready to register or query
    """
    settings = settings or create_settings_manager()
    scopes = settings.load_all()

    search_path: list[str] | None = None
    overrides: dict[str, str] = {}
    for _scope, scope_settings in scopes:
        overrides.update(scope_settings.overrides)
        if scope_settings.search_path is not None:
            search_path = scope_settings.search_path

    effective_mode = mode or os.environ.get(MODE_ENV) or settings.get_mode() or Mode.NORMAL
    loader = Loader(host or SymbolHost(), FileSystem(search_path), effective_mode)

    for scope, scope_settings in scopes:
        loader.add_all(scope_settings.prefix_dirs())
        logger.debug(f"[autoload] applied {len(scope_settings.prefixes)} prefixes from {scope} settings")

    loader.set_overrides(overrides)
    return loader
