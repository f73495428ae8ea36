"""Load coordinator - resolves, executes and records symbols on demand.

A load walks four decision points:
1. Is the symbol already defined?
2. Can a file be resolved for it?
3. Execute the file
4. Is the symbol defined now?

Each failing decision point yields a LoadOutcome. Whether that outcome is
raised or ignored depends only on the operating Mode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from enum import Enum

from .errors import LoadOutcome
from .errors import OutcomeKind
from .host import FileSystemProtocol
from .host import HostProtocol
from .inflector import to_relative_path
from .registry import PathLike
from .registry import PathRegistry
from .resolver import Resolution
from .resolver import Resolver

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Operating mode of the loader.

    Modes:
    - SILENT: Never raise; missing and undeclared symbols are skipped
    - NORMAL: Raise when no file is found
    - DEBUG: Also raise on repeated loads and on files that define nothing
    """

    SILENT = "silent"
    NORMAL = "normal"
    DEBUG = "debug"


# Outcome kinds surfaced as exceptions in each mode
_SURFACED: dict[Mode, frozenset[OutcomeKind]] = {
    Mode.SILENT: frozenset(),
    Mode.NORMAL: frozenset({OutcomeKind.NOT_FOUND}),
    Mode.DEBUG: frozenset({OutcomeKind.ALREADY_DEFINED, OutcomeKind.NOT_FOUND, OutcomeKind.NOT_DECLARED}),
}


def parse_mode(value: Mode | str) -> Mode:
    """Coerce a Mode or its string value.

    Raises:
        ValueError: Unknown mode
    """
    if isinstance(value, Mode):
        return value
    try:
        return Mode(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise ValueError(f"Invalid autoload mode '{value}' (expected one of: {choices})") from None


class Loader:
    """Autoloader for one host environment.

    Every instance owns its own prefix registry, overrides, loaded registry
    and mode, so several loaders can coexist.

    Args:
        host: Symbol environment (is_defined / execute / hooks)
        filesystem: Filesystem probes (defaults to the local filesystem)
        mode: Initial operating mode
    """

    def __init__(
        self,
        host: HostProtocol,
        filesystem: FileSystemProtocol | None = None,
        mode: Mode | str = Mode.NORMAL,
    ):
        self.host = host
        self.registry = PathRegistry()
        self.resolver = Resolver(self.registry, filesystem)
        self._loaded: dict[str, str] = {}
        self._mode = parse_mode(mode)

    # ----- mode -----

    def set_mode(self, mode: Mode | str) -> None:
        self._mode = parse_mode(mode)
        logger.debug(f"[autoload] mode set to {self._mode.value}")

    def get_mode(self) -> Mode:
        return self._mode

    def is_silent(self) -> bool:
        return self._mode is Mode.SILENT

    def is_debug(self) -> bool:
        return self._mode is Mode.DEBUG

    # ----- registry -----

    def add(self, prefix: str, paths: PathLike | Iterable[PathLike]) -> None:
        self.registry.add(prefix, paths)

    def add_all(self, mapping: Mapping[str, PathLike | Iterable[PathLike]]) -> None:
        self.registry.add_all(mapping)

    def get_prefixes(self) -> dict[str, list[str]]:
        return self.registry.get_prefixes()

    def set_override(self, name: str, path: PathLike) -> None:
        self.registry.set_override(name, path)

    def set_overrides(self, mapping: Mapping[str, PathLike]) -> None:
        self.registry.set_overrides(mapping)

    def get_overrides(self) -> dict[str, str]:
        return self.registry.get_overrides()

    def get_loaded(self) -> dict[str, str]:
        """Return symbols loaded by this loader, in load order, mapped to their files."""
        return dict(self._loaded)

    # ----- resolution -----

    def find(self, name: str) -> Resolution:
        return self.resolver.find(name)

    def find_dirs(self, namespace: str) -> list[str]:
        return self.resolver.find_dirs(namespace)

    def to_relative_path(self, name: str) -> str:
        return to_relative_path(name)

    # ----- loading -----

    def load(self, name: str) -> None:
        """Load the file defining ``name`` and record it.

        Raises:
            AlreadyLoaded: Symbol already defined (debug mode)
            NotReadable: No readable file found (normal and debug modes)
            NotDeclared: File ran but did not define the symbol (debug mode)
        """
        self._settle(self._attempt(name))

    def _attempt(self, name: str) -> LoadOutcome:
        if self.host.is_defined(name):
            return LoadOutcome(OutcomeKind.ALREADY_DEFINED, name)

        resolution = self.resolver.find(name)
        path = resolution.path
        if path is None:
            return LoadOutcome(OutcomeKind.NOT_FOUND, name, trail=resolution.trail)

        self.host.execute(path)

        if not self.host.is_defined(name):
            return LoadOutcome(OutcomeKind.NOT_DECLARED, name, path=path, trail=resolution.trail)

        self._loaded.setdefault(name, path)
        return LoadOutcome(OutcomeKind.LOADED, name, path=path, trail=resolution.trail)

    def _settle(self, outcome: LoadOutcome) -> None:
        """Apply the mode policy to an outcome: raise it or let it pass."""
        if not outcome.failed:
            logger.debug(
                f"[autoload] loaded {outcome.name} from {outcome.path}",
                extra={"event": "autoload:loaded", "symbol": outcome.name, "path": outcome.path},
            )
            return

        if outcome.kind in _SURFACED[self._mode]:
            logger.warning(
                f"[autoload] {outcome.kind.value}: {outcome.name} (mode {self._mode.value})",
                extra={"event": f"autoload:{outcome.kind.value}", "symbol": outcome.name},
            )
            raise outcome.error()

        logger.debug(f"[autoload] {outcome.kind.value}: {outcome.name} ignored in {self._mode.value} mode")

    # ----- host hook -----

    def register(self, prepend: bool = False) -> None:
        """Install ``load`` as the host's deferred-resolution hook.

        Registering again is a no-op.

        Args:
            prepend: Run this loader before hooks already installed
        """
        self.host.add_hook(self.load, prepend=prepend)

    def unregister(self) -> None:
        """Remove the hook; safe when never registered."""
        self.host.remove_hook(self.load)

    def is_registered(self) -> bool:
        return self.host.has_hook(self.load)

    def __repr__(self) -> str:
        return f"Loader(mode={self._mode.value}, prefixes={len(self.registry.get_prefixes())}, loaded={len(self._loaded)})"
