"""Symbol name to file path inflection.

Hierarchical names use ``.`` between namespace segments. Inside the final
segment ``_`` is a legacy word separator and also maps to a directory.
"""

import os

NAMESPACE_SEPARATOR = "."
WORD_SEPARATOR = "_"
SOURCE_EXTENSION = ".py"


def to_relative_path(name: str) -> str:
    """Convert a full symbol name to a file path relative to a source root.

    Examples:
        ``Foo`` -> ``Foo.py``
        ``Foo_Bar`` -> ``Foo/Bar.py``
        ``ns.Baz_Dib`` -> ``ns/Baz/Dib.py``

    Args:
        name: Full symbol name (never prefix-stripped)

    Returns:
        Relative file path using the platform separator
    """
    namespace, sep, leaf = name.rpartition(NAMESPACE_SEPARATOR)
    if sep:
        # Underscores in the namespace portion are kept as-is
        namespace = namespace.replace(NAMESPACE_SEPARATOR, os.sep) + os.sep

    return namespace + leaf.replace(WORD_SEPARATOR, os.sep) + SOURCE_EXTENSION


def namespace_to_dir(namespace: str) -> str:
    """Convert a namespace (no leaf) to a relative directory path."""
    return namespace.rstrip(NAMESPACE_SEPARATOR).replace(NAMESPACE_SEPARATOR, os.sep)
