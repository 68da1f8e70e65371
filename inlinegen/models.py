"""
Data models for the inlines generator.

This module contains the state accumulated while walking a library and the
result returned once the output files are written.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CollectedInlines:
    """Everything the collector found during a single library traversal.

    The lists never contain duplicates. ``templates`` and ``mangled_inlines``
    keep discovery order; the position in ``mangled_inlines`` becomes the
    export ordinal in module-definition files, so the order must be stable
    for the same input.

    Attributes:
        headers: Header file names to include in the aggregation unit
        templates: Printed template specializations to instantiate
        mangled_inlines: Mangled symbols to export
    """

    headers: list[str] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)
    mangled_inlines: list[str] = field(default_factory=list)
    _seen: set[tuple[str, str]] = field(
        default_factory=set, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._seen.update(("header", h) for h in self.headers)
        self._seen.update(("template", t) for t in self.templates)
        self._seen.update(("symbol", s) for s in self.mangled_inlines)

    def _add(self, kind: str, items: list[str], item: str) -> bool:
        if (kind, item) in self._seen:
            return False
        self._seen.add((kind, item))
        items.append(item)
        return True

    def add_header(self, header: str) -> bool:
        return self._add("header", self.headers, header)

    def add_template(self, template: str) -> bool:
        return self._add("template", self.templates, template)

    def add_symbol(self, mangled: str) -> bool:
        return self._add("symbol", self.mangled_inlines, mangled)


@dataclass
class InlinesResult:
    """Result of a generator run.

    Attributes:
        collected: State gathered from the library
        source_path: Written aggregation unit
        symbols_path: Written export manifest
    """

    collected: CollectedInlines
    source_path: Path
    symbols_path: Path
