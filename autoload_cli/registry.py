"""Prefix and exact-name registry for symbol resolution.

Two tables with deliberately different mutation contracts:
- Prefixes: symbol prefix -> base directories, additive only
- Overrides: exact symbol name -> file path, merge one or replace all
"""

import logging
import os
from collections.abc import Iterable
from collections.abc import Mapping

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def _normalize_dir(path: PathLike) -> str:
    """Strip trailing separators, keeping a bare root intact."""
    text = os.fspath(path)
    return text.rstrip(os.sep) or text[:1]


def _as_paths(paths: PathLike | Iterable[PathLike]) -> list[PathLike]:
    if isinstance(paths, (str, os.PathLike)):
        return [paths]
    return list(paths)


class PathRegistry:
    """Ordered prefix registry plus exact override table."""

    def __init__(self):
        self._prefixes: dict[str, list[str]] = {}
        self._overrides: dict[str, str] = {}

    def add(self, prefix: str, paths: PathLike | Iterable[PathLike]) -> None:
        """Append one or more base directories for a symbol prefix.

        Existing directories for the prefix are kept; new ones go after them.

        Args:
            prefix: Symbol name prefix, e.g. ``"Vendor.Package."``
            paths: A directory or an iterable of directories
        """
        dirs = self._prefixes.setdefault(prefix, [])
        for path in _as_paths(paths):
            dirs.append(_normalize_dir(path))
            logger.debug(f"[autoload] prefix {prefix!r} -> {dirs[-1]}")

    def add_all(self, mapping: Mapping[str, PathLike | Iterable[PathLike]]) -> None:
        """Add directories for every prefix in ``mapping``.

        Additive: prefixes already registered keep their directories, so
        configuration can be layered from several sources.
        """
        for prefix, paths in mapping.items():
            self.add(prefix, paths)

    def get_prefixes(self) -> dict[str, list[str]]:
        return {prefix: list(dirs) for prefix, dirs in self._prefixes.items()}

    def set_override(self, name: str, path: PathLike) -> None:
        """Map an exact symbol name to a file path, replacing any previous mapping."""
        self._overrides[name] = os.fspath(path)

    def set_overrides(self, mapping: Mapping[str, PathLike]) -> None:
        """Replace the whole override table with ``mapping``."""
        self._overrides = {name: os.fspath(path) for name, path in mapping.items()}

    def remove_override(self, name: str) -> bool:
        """Drop one exact mapping.

        Returns:
            True if the name was mapped, False otherwise
        """
        return self._overrides.pop(name, None) is not None

    def get_override(self, name: str) -> str | None:
        return self._overrides.get(name)

    def get_overrides(self) -> dict[str, str]:
        return dict(self._overrides)

    def iter_prefixes(self) -> Iterable[tuple[str, list[str]]]:
        """Yield (prefix, dirs) in registration order."""
        return self._prefixes.items()

    def __repr__(self) -> str:
        return f"PathRegistry(prefixes={len(self._prefixes)}, overrides={len(self._overrides)})"
