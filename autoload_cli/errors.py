"""Autoload error kinds and the tagged outcome of a load attempt.

Defines:
- AutoloadError: Base class for all loader failures
- AlreadyLoaded: A defined symbol was requested again (debug mode)
- NotReadable: No readable file was found for a symbol
- NotDeclared: A file ran but did not define the expected symbol (debug mode)
- OutcomeKind / LoadOutcome: What happened at each decision point of a load
- SymbolNotDefined: A host lookup that no hook could satisfy
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum


class AutoloadError(Exception):
    """Base class for autoload failures."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or name)


class AlreadyLoaded(AutoloadError):
    """Indicates a symbol has already been loaded."""


class NotReadable(AutoloadError):
    """Indicates the loader failed to find a readable file for a symbol.

    Attributes:
        trail: Every location probed while resolving the symbol, in order
    """

    def __init__(self, name: str, trail: tuple[str, ...] | list[str] = ()):
        self.trail = tuple(trail)
        super().__init__(name, "\n".join((name, *self.trail)))


class NotDeclared(AutoloadError):
    """Indicates the loader did not find a symbol definition after loading its file."""


class SymbolNotDefined(LookupError):
    """Raised by a host lookup when no registered hook defined the symbol."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol '{name}' is not defined")


class OutcomeKind(str, Enum):
    """Result of a single load attempt.

    Kinds:
    - LOADED: File executed and the symbol is now defined
    - ALREADY_DEFINED: Symbol was defined before the attempt
    - NOT_FOUND: No candidate file could be resolved
    - NOT_DECLARED: File executed but the symbol is still undefined
    """

    LOADED = "loaded"
    ALREADY_DEFINED = "already_defined"
    NOT_FOUND = "not_found"
    NOT_DECLARED = "not_declared"


@dataclass(frozen=True)
class LoadOutcome:
    """Tagged outcome carrying the name, resolved path and diagnostic trail."""

    kind: OutcomeKind
    name: str
    path: str | None = None
    trail: tuple[str, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> bool:
        return self.kind is not OutcomeKind.LOADED

    def error(self) -> AutoloadError:
        """Build the exception matching this outcome.

        Raises:
            ValueError: For a LOADED outcome, which has no error form
        """
        if self.kind is OutcomeKind.ALREADY_DEFINED:
            return AlreadyLoaded(self.name)
        if self.kind is OutcomeKind.NOT_FOUND:
            return NotReadable(self.name, self.trail)
        if self.kind is OutcomeKind.NOT_DECLARED:
            return NotDeclared(self.name)
        raise ValueError(f"Outcome '{self.kind.value}' for {self.name} is not an error")
