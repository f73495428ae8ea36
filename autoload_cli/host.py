"""Host capabilities consumed by the loader, with default implementations.

The loader never introspects the running environment directly. It calls
through two small interfaces:
- HostProtocol: symbol table queries, file execution, deferred-resolution hooks
- FileSystemProtocol: readability probes and search-path lookup

SymbolHost and FileSystem are the in-process implementations used by the
CLI and the tests.
"""

from __future__ import annotations

import inspect
import logging
import os
import runpy
import sys
from collections.abc import Callable
from collections.abc import Iterable
from typing import Any
from typing import Protocol

from .errors import SymbolNotDefined

logger = logging.getLogger(__name__)

Hook = Callable[[str], None]


class HostProtocol(Protocol):
    """Environment that defines symbols and dispatches unresolved references."""

    def is_defined(self, name: str) -> bool: ...

    def execute(self, path: str) -> None: ...

    def add_hook(self, hook: Hook, prepend: bool = False) -> None: ...

    def remove_hook(self, hook: Hook) -> None: ...

    def has_hook(self, hook: Hook) -> bool: ...


class FileSystemProtocol(Protocol):
    """Filesystem and search-path primitives."""

    def probe_readable(self, path: str) -> bool: ...

    def probe_search_path(self, relative_path: str) -> str | None: ...

    def is_dir(self, path: str) -> bool: ...

    def describe_search_path(self) -> str: ...


class SymbolHost:
    """In-process symbol table with autoload hooks.

    Executed files receive two globals:
    - ``use(name)``: look up a symbol, autoloading it if needed
    - ``define(name, obj)``: define a symbol explicitly

    Top-level classes and functions created by an executed file are defined
    under ``<__namespace__>.<name>`` when the file sets ``__namespace__``,
    otherwise under their bare name.
    """

    def __init__(self):
        self.symbols: dict[str, Any] = {}
        self._hooks: list[Hook] = []

    def define(self, name: str, obj: Any) -> Any:
        self.symbols[name] = obj
        return obj

    def is_defined(self, name: str) -> bool:
        return name in self.symbols

    def get(self, name: str) -> Any:
        return self.symbols[name]

    def lookup(self, name: str) -> Any:
        """Return a symbol, giving each registered hook a chance to load it.

        Raises:
            SymbolNotDefined: If no hook defined the symbol
        """
        if name in self.symbols:
            return self.symbols[name]

        for hook in list(self._hooks):
            hook(name)
            if name in self.symbols:
                return self.symbols[name]

        raise SymbolNotDefined(name)

    def execute(self, path: str) -> None:
        """Run a source file and define the symbols it declares."""
        logger.debug(f"[autoload] executing {path}")
        # Unique per file so nested executions never share a module name
        run_name = f"__autoload__[{os.path.abspath(path)}]"
        namespace = runpy.run_path(
            path,
            init_globals={"use": self.lookup, "define": self.define},
            run_name=run_name,
        )
        self._collect(namespace, run_name, path)

    def _collect(self, namespace: dict[str, Any], run_name: str, path: str) -> None:
        prefix = namespace.get("__namespace__") or ""
        if not isinstance(prefix, str):
            raise TypeError(f"__namespace__ in {path} must be a string, not {type(prefix).__name__}")
        if prefix and not prefix.endswith("."):
            prefix += "."

        for attr, obj in namespace.items():
            if attr.startswith("_"):
                continue
            if not (inspect.isclass(obj) or inspect.isfunction(obj)):
                continue
            # Skip anything imported into the file rather than created by it
            if getattr(obj, "__module__", None) != run_name:
                continue
            self.symbols.setdefault(prefix + obj.__name__, obj)

    def add_hook(self, hook: Hook, prepend: bool = False) -> None:
        if hook in self._hooks:
            return
        if prepend:
            self._hooks.insert(0, hook)
        else:
            self._hooks.append(hook)

    def remove_hook(self, hook: Hook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def has_hook(self, hook: Hook) -> bool:
        return hook in self._hooks

    @property
    def hooks(self) -> list[Hook]:
        return list(self._hooks)

    def __repr__(self) -> str:
        return f"SymbolHost(symbols={len(self.symbols)}, hooks={len(self._hooks)})"


class FileSystem:
    """Local filesystem probes with a fallback search path.

    Args:
        search_path: Roots for the last-resort lookup (defaults to ``sys.path``)
    """

    def __init__(self, search_path: Iterable[str | os.PathLike[str]] | None = None):
        self._search_path = None if search_path is None else [os.fspath(p) for p in search_path]

    @property
    def search_path(self) -> list[str]:
        return list(sys.path) if self._search_path is None else list(self._search_path)

    def probe_readable(self, path: str) -> bool:
        return os.path.isfile(path) and os.access(path, os.R_OK)

    def probe_search_path(self, relative_path: str) -> str | None:
        """Find ``relative_path`` under the first search root that has it.

        Returns:
            Canonical absolute path, or None if no root has a readable file
        """
        for root in self.search_path:
            candidate = os.path.join(root or os.curdir, relative_path)
            if self.probe_readable(candidate):
                return os.path.realpath(candidate)
        return None

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def describe_search_path(self) -> str:
        return os.pathsep.join(self.search_path)
