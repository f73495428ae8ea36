"""Autoload - on-demand symbol resolution and loading.

Maps hierarchical symbol names such as ``Vendor.Package.Widget`` to the
source file expected to define them, executes that file through a host,
and records what was loaded.
"""

from .errors import AlreadyLoaded
from .errors import AutoloadError
from .errors import LoadOutcome
from .errors import NotDeclared
from .errors import NotReadable
from .errors import OutcomeKind
from .errors import SymbolNotDefined
from .host import FileSystem
from .host import SymbolHost
from .inflector import namespace_to_dir
from .inflector import to_relative_path
from .loader import Loader
from .loader import Mode
from .registry import PathRegistry
from .resolver import Resolution
from .resolver import Resolver

__all__ = [
    "AlreadyLoaded",
    "AutoloadError",
    "FileSystem",
    "LoadOutcome",
    "Loader",
    "Mode",
    "NotDeclared",
    "NotReadable",
    "OutcomeKind",
    "PathRegistry",
    "Resolution",
    "Resolver",
    "SymbolHost",
    "SymbolNotDefined",
    "namespace_to_dir",
    "to_relative_path",
]
