"""
Exceptions raised by the inlines generator.

Declarations that do not qualify for export and template specializations
that cannot be instantiated are skipped silently; they are not errors.
"""

from pathlib import Path


class InlinegenError(Exception):
    """Base class for all errors raised by inlinegen."""


class OutputError(InlinegenError):
    """An output directory or file could not be written.

    The run is considered failed; nothing is retried.

    Examples:
        >>> raise OutputError("Cannot write out/Lib.cpp", Path("out/Lib.cpp"))
        OutputError: Cannot write out/Lib.cpp
    """

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


class LibraryLoadError(InlinegenError):
    """A library description is malformed or refers to unknown declarations."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        location_info = f" in {source}" if source else ""
        super().__init__(f"{message}{location_info}")


class SymbolTableError(InlinegenError):
    """The table of already exported symbols could not be read."""


class TraversalError(InlinegenError):
    """A declaration was reached outside of any translation unit."""
