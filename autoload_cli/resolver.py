"""Symbol resolver - maps a symbol name to the file expected to define it.

Resolution order (first match wins):
1. Exact override (no existence check)
2. Prefix registry, entries and their directories in registration order
3. Fallback search path

Each call returns its own diagnostic trail, so a nested resolution triggered
while executing a file never disturbs the trail of an outer one.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

from .host import FileSystem
from .host import FileSystemProtocol
from .inflector import NAMESPACE_SEPARATOR
from .inflector import namespace_to_dir
from .inflector import to_relative_path
from .registry import PathRegistry

logger = logging.getLogger(__name__)

SourceType = Literal["override", "prefix", "search_path"]


@dataclass(frozen=True)
class Resolution:
    """Result of a single ``find`` call.

    Attributes:
        name: Symbol name that was resolved
        path: File path, or None when nothing was found
        trail: Every location probed, in order
        source: Which stage produced the path
    """

    name: str
    path: str | None
    trail: tuple[str, ...] = ()
    source: SourceType | None = None

    @property
    def found(self) -> bool:
        return self.path is not None

    def __bool__(self) -> bool:
        return self.found


class Resolver:
    """Resolve symbol names against a PathRegistry.

    Args:
        registry: Prefix and override tables
        filesystem: Readability and search-path probes
    """

    def __init__(self, registry: PathRegistry, filesystem: FileSystemProtocol | None = None):
        self.registry = registry
        self.filesystem = filesystem or FileSystem()

    def find(self, name: str) -> Resolution:
        """Find the file for a symbol.

        Args:
            name: Full symbol name

        Returns:
            Resolution with the path (or None) and the trail of probed locations
        """
        override = self.registry.get_override(name)
        if override is not None:
            logger.debug(f"[autoload:resolve] {name} -> override ({override})")
            return Resolution(name=name, path=override, source="override")

        trail: list[str] = []

        for prefix, dirs in self.registry.iter_prefixes():
            # Non-matching entries are skipped, not a reason to stop
            if not name.startswith(prefix):
                continue

            relative = to_relative_path(name)
            for base in dirs:
                trail.append(f"{base} (prefix {prefix})")
                candidate = base + os.sep + relative
                if self.filesystem.probe_readable(candidate):
                    logger.debug(f"[autoload:resolve] {name} -> prefix {prefix!r} ({candidate})")
                    return Resolution(name=name, path=candidate, trail=tuple(trail), source="prefix")

        relative = to_relative_path(name)
        trail.append(f"{self.filesystem.describe_search_path()} (search path)")
        located = self.filesystem.probe_search_path(relative)
        if located is not None:
            logger.debug(f"[autoload:resolve] {name} -> search path ({located})")
            return Resolution(name=name, path=located, trail=tuple(trail), source="search_path")

        logger.debug(f"[autoload:resolve] {name} not found after {len(trail)} locations")
        return Resolution(name=name, path=None, trail=tuple(trail))

    def find_dirs(self, namespace: str) -> list[str]:
        """List existing directories holding a namespace, across all matching prefixes.

        Args:
            namespace: Namespace such as ``"Vendor.Package"`` (trailing ``.`` allowed)

        Returns:
            Directories in resolution priority order, without duplicates
        """
        namespace = namespace.rstrip(NAMESPACE_SEPARATOR)
        relative = namespace_to_dir(namespace)
        found: list[str] = []

        for prefix, dirs in self.registry.iter_prefixes():
            if not namespace.startswith(prefix.rstrip(NAMESPACE_SEPARATOR)):
                continue
            for base in dirs:
                candidate = base + os.sep + relative if relative else base
                if candidate not in found and self.filesystem.is_dir(candidate):
                    found.append(candidate)

        return found
