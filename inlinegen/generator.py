"""
Top-level driver of the inlines generator.

Walks a resolved library exactly once, then writes the aggregation unit and
the ABI-specific export manifest into the configured output directory.
"""

from pathlib import Path

from loguru import logger

from inlinegen.ast.nodes import ASTContext
from inlinegen.config import InlinesOptions
from inlinegen.emitter import render_inlines_source
from inlinegen.errors import OutputError
from inlinegen.models import InlinesResult
from inlinegen.passes.collector import collect_inlines
from inlinegen.symbols import SymbolLookup, SymbolTable
from inlinegen.target import create_export_format


def _write_text(path: Path, text: str) -> None:
    # newline="" keeps CRLF and LF endings exactly as rendered.
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise OutputError(f"Cannot write {path}: {e}", path) from e


def _ensure_output_dir(output_dir: Path) -> None:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create output directory {output_dir}: {e}")
        raise OutputError(
            f"Cannot create output directory {output_dir}: {e}", output_dir
        ) from e


def generate_inlines(
    context: ASTContext,
    options: InlinesOptions,
    symbols: SymbolLookup | None = None,
) -> InlinesResult:
    """Collect inline symbols of a library and write the inlines artifacts.

    Args:
        context: Resolved library to walk
        options: Output directory, library name and ABI
        symbols: Symbols the library already exports; empty if not given

    Returns:
        Collected state and the paths of the written files

    Raises:
        OutputError: If the output directory or a file cannot be written
    """
    if symbols is None:
        symbols = SymbolTable()

    collected = collect_inlines(context, symbols)

    _ensure_output_dir(options.output_dir)

    source_path = options.source_path
    _write_text(
        source_path, render_inlines_source(collected.headers, collected.templates)
    )
    logger.info(f"Wrote aggregation unit to {source_path}")

    export_format = create_export_format(options.abi)
    symbols_path = options.symbols_path(export_format.extension)
    _write_text(symbols_path, export_format.render(collected.mangled_inlines))
    logger.info(
        f"Wrote {len(collected.mangled_inlines)} {options.abi.name} exports "
        f"to {symbols_path}"
    )

    return InlinesResult(
        collected=collected, source_path=source_path, symbols_path=symbols_path
    )
