"""Command line interface for inlinegen.

This module provides a command-line interface for generating the inlines
library artifacts (aggregation unit and export manifest) from a resolved C++
library description.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import typer
from loguru import logger

from inlinegen.ast.loader import load_library
from inlinegen.config import CppAbi, InlinesOptions
from inlinegen.constants import DEFAULT_INLINES_LIBRARY_NAME
from inlinegen.emitter import render_inlines_source, render_symbols
from inlinegen.errors import InlinegenError
from inlinegen.generator import generate_inlines
from inlinegen.passes.collector import collect_inlines
from inlinegen.symbols import SymbolTable

# Define type variables for TypedCallable
F = TypeVar("F", bound=Callable[..., Any])


# TypedCommand decorator helper
def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="inlinegen",
    help=(
        "Export inline C++ functions and template instantiations from a "
        "shared library. Commands: generate, collect."
    ),
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _parse_abi(abi: str) -> CppAbi:
    try:
        return CppAbi.from_name(abi)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


def _load_symbols(symbols_file: Path | None) -> SymbolTable:
    if symbols_file is None:
        return SymbolTable()
    return SymbolTable.from_file(symbols_file)


LIBRARY_ARG = typer.Argument(..., help="JSON description of the resolved library")
SYMBOLS_OPTION = typer.Option(
    None, "--symbols", "-s", help="Listing of symbols the library already exports"
)


@typed_command(app.command("generate"))
def generate(
    library_file: Path = LIBRARY_ARG,
    output_dir: Path = typer.Option(
        Path("."), "--output-dir", "-o", help="Directory for the generated files"
    ),
    name: str = typer.Option(
        DEFAULT_INLINES_LIBRARY_NAME,
        "--name",
        "-n",
        help="Base name of the inlines library",
    ),
    abi: str = typer.Option(
        "itanium",
        "--abi",
        "-a",
        help="Target ABI (itanium, microsoft, arm, ios, ios64)",
    ),
    symbols_file: Path | None = SYMBOLS_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Write the aggregation unit and export manifest.

    Example: inlinegen generate lib.json -o build -n Qt5Core-inlines -a microsoft
    """
    _configure_logging(verbose)
    cpp_abi = _parse_abi(abi)
    try:
        context = load_library(library_file)
        symbols = _load_symbols(symbols_file)
        options = InlinesOptions(
            output_dir=output_dir, inlines_library_name=name, abi=cpp_abi
        )
        result = generate_inlines(context, options, symbols)
    except InlinegenError as e:
        logger.error(f"Generation failed: {e}")
        raise typer.Exit(1) from e
    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        raise typer.Exit(1) from e

    typer.echo(str(result.source_path))
    typer.echo(str(result.symbols_path))


@typed_command(app.command("collect"))
def collect(
    library_file: Path = LIBRARY_ARG,
    abi: str = typer.Option(
        "itanium", "--abi", "-a", help="Target ABI used to render the manifest"
    ),
    symbols_file: Path | None = SYMBOLS_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Print the generated files to stdout without writing them.

    Example: inlinegen collect lib.json --abi microsoft
    """
    _configure_logging(verbose)
    cpp_abi = _parse_abi(abi)
    try:
        context = load_library(library_file)
        symbols = _load_symbols(symbols_file)
        collected = collect_inlines(context, symbols)
    except InlinegenError as e:
        logger.error(f"Collection failed: {e}")
        raise typer.Exit(1) from e

    typer.echo(render_inlines_source(collected.headers, collected.templates), nl=False)
    typer.echo(render_symbols(collected.mangled_inlines, cpp_abi), nl=False)


if __name__ == "__main__":
    app()
