"""Export manifest formats.

An ExportFormat knows how the linker of one ABI family expects exported
symbols to be listed:
- Module-definition files with ordinals for the Microsoft ABI
- Plain symbol lists for every other ABI
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from inlinegen.config import CppAbi


class ExportFormat(ABC):
    """Base class for export manifest formats."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension of the manifest, without the dot."""
        ...

    @abstractmethod
    def render(self, symbols: Sequence[str]) -> str:
        """Render the manifest for symbols in discovery order."""
        ...


class ModuleDefinitionFormat(ExportFormat):
    """Module-definition (.def) file for the Microsoft linker.

    Ordinals follow the order of the symbols, starting at 1, so re-running on
    the same library keeps the exports ABI-compatible.
    """

    newline = "\r\n"

    @property
    def extension(self) -> str:
        return "def"

    def render(self, symbols: Sequence[str]) -> str:
        lines = ["EXPORTS"]
        lines.extend(
            f"    {symbol} @{ordinal}"
            for ordinal, symbol in enumerate(symbols, start=1)
        )
        return "".join(line + self.newline for line in lines)


class SymbolListFormat(ExportFormat):
    """One mangled name per line."""

    newline = "\n"

    @property
    def extension(self) -> str:
        return "txt"

    def render(self, symbols: Sequence[str]) -> str:
        return "".join(symbol + self.newline for symbol in symbols)


def create_export_format(abi: CppAbi) -> ExportFormat:
    """Create the export format used by an ABI.

    Args:
        abi: Configured target ABI

    Returns:
        ModuleDefinitionFormat for the Microsoft ABI, SymbolListFormat otherwise
    """
    if abi == CppAbi.MICROSOFT:
        return ModuleDefinitionFormat()
    return SymbolListFormat()
