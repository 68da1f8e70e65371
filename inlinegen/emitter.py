"""Renders collected inlines into the aggregation unit and export manifest."""

from collections.abc import Iterable, Sequence

from inlinegen.config import CppAbi
from inlinegen.constants import EXPORT_ATTRIBUTE
from inlinegen.target import create_export_format


def render_inlines_source(headers: Iterable[str], templates: Iterable[str]) -> str:
    """Generate the aggregation unit.

    Headers are included in sorted order, then every template gets an explicit
    exported instantiation in the order it was discovered.
    """
    lines = [f'#include "{header}"' for header in sorted(headers)]
    lines.append("")
    lines.extend(
        f"template class {EXPORT_ATTRIBUTE} {template};" for template in templates
    )
    return "".join(line + "\n" for line in lines)


def render_symbols(mangled_inlines: Sequence[str], abi: CppAbi) -> str:
    """Generate the export manifest for the configured ABI."""
    return create_export_format(abi).render(mangled_inlines)
