"""Configuration for a generator run."""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


class CppAbi(Enum):
    """C++ ABI of the library being wrapped."""

    ITANIUM = auto()
    MICROSOFT = auto()
    ARM = auto()
    IOS = auto()
    IOS64 = auto()

    @classmethod
    def from_name(cls, name: str) -> "CppAbi":
        """Parse an ABI name case-insensitively.

        Args:
            name: ABI name such as "microsoft" or "Itanium"

        Returns:
            Matching ABI

        Raises:
            ValueError: If the name is not a known ABI
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            known = ", ".join(abi.name.lower() for abi in cls)
            raise ValueError(f"Unknown ABI: {name}. Expected one of: {known}") from None


@dataclass
class InlinesOptions:
    """Where and how the inlines library artifacts are written.

    Attributes:
        output_dir: Directory receiving the generated files
        inlines_library_name: Base name shared by all generated files
        abi: Target ABI, selects the export manifest format
    """

    output_dir: Path
    inlines_library_name: str
    abi: CppAbi = CppAbi.ITANIUM

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        if not self.inlines_library_name:
            raise ValueError("Inlines library name must not be empty")

    @property
    def source_path(self) -> Path:
        return self.output_dir / f"{self.inlines_library_name}.cpp"

    def symbols_path(self, extension: str) -> Path:
        return self.output_dir / f"{self.inlines_library_name}.{extension}"
