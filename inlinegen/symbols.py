"""
Lookup of symbols the wrapped library already exports.

Symbols found here are emitted by the library's own object files, so the
inlines library must not export them a second time.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from loguru import logger

from inlinegen.errors import SymbolTableError


class SymbolLookup(Protocol):
    """Read-only view of already exported symbols."""

    def find_symbol(self, name: str) -> bool:
        """Return True if the mangled name is already exported."""
        ...


class SymbolTable:
    """Set-backed symbol lookup."""

    def __init__(self, symbols: Iterable[str] = ()):
        self._symbols: set[str] = set(symbols)

    def add(self, name: str) -> None:
        self._symbols.add(name)

    def find_symbol(self, name: str) -> bool:
        return name in self._symbols

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "SymbolTable":
        """Build a table from a symbol listing.

        Blank lines and lines starting with ``#`` are skipped. Lines with
        several fields, as printed by ``nm`` or ``dumpbin``, contribute their
        last field.

        Args:
            lines: Lines of the listing

        Returns:
            Symbol table holding every listed symbol
        """
        table = cls()
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            table.add(stripped.split()[-1])
        return table

    @classmethod
    def from_file(cls, path: str | Path) -> "SymbolTable":
        """Read a symbol listing from a file.

        Raises:
            SymbolTableError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read symbol table {path}: {e}")
            raise SymbolTableError(f"Cannot read symbol table {path}: {e}") from e
        table = cls.from_lines(text.splitlines())
        logger.info(f"Loaded {len(table)} exported symbols from {path}")
        return table
