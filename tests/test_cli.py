"""Tests for the inlinegen command-line interface."""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from inlinegen.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore the default loguru sink replaced by the CLI."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def library_file(tmp_path):
    """Create a library description with a public and a private header."""
    data = {
        "units": [
            {
                "file_path": "/inc/shape.h",
                "declarations": [
                    {"kind": "function", "name": "area", "mangled": "_Z4areav"},
                    {"kind": "function", "name": "size", "mangled": "_Z4sizev"},
                    {"kind": "class", "name": "Box"},
                    {
                        "kind": "variable",
                        "name": "unit_box",
                        "mangled": "_Z8unit_box",
                        "type": {
                            "kind": "specialization",
                            "template": "Box",
                            "arguments": [{"type": {"kind": "builtin", "name": "int"}}],
                        },
                    },
                ],
            },
            {
                "file_path": "/inc/shape_impl.h",
                "declarations": [
                    {"kind": "function", "name": "helper", "mangled": "_Z7helperv"}
                ],
            },
        ]
    }
    path = tmp_path / "lib.json"
    path.write_text(json.dumps(data))
    return path


def test_help():
    """Test that the CLI help command works."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Export inline C++ functions" in result.stdout


def test_generate_microsoft(library_file, tmp_path):
    """Test writing the aggregation unit and module-definition file."""
    out = tmp_path / "out"
    result = runner.invoke(
        app,
        [
            "generate",
            str(library_file),
            "--output-dir",
            str(out),
            "--name",
            "Shape-inlines",
            "--abi",
            "microsoft",
        ],
    )

    assert result.exit_code == 0
    assert (out / "Shape-inlines.cpp").read_text() == (
        '#include "shape.h"\n\ntemplate class __declspec(dllexport) Box<int>;\n'
    )
    assert (out / "Shape-inlines.def").read_bytes() == (
        b"EXPORTS\r\n    _Z4areav @1\r\n    _Z4sizev @2\r\n    _Z8unit_box @3\r\n"
    )


def test_generate_with_symbols(library_file, tmp_path):
    """Test that symbols listed in --symbols are not exported again."""
    symbols = tmp_path / "exports.txt"
    symbols.write_text("0000000000001139 T _Z4sizev\n")

    result = runner.invoke(
        app,
        [
            "generate",
            str(library_file),
            "-o",
            str(tmp_path),
            "-n",
            "Shape",
            "--symbols",
            str(symbols),
        ],
    )

    assert result.exit_code == 0
    assert (tmp_path / "Shape.txt").read_text() == "_Z4areav\n_Z8unit_box\n"
    assert str(Path(tmp_path / "Shape.txt")) in result.stdout


def test_generate_unknown_abi(library_file, tmp_path):
    result = runner.invoke(
        app, ["generate", str(library_file), "-o", str(tmp_path), "--abi", "msvc"]
    )
    assert result.exit_code == 1


def test_generate_empty_name(library_file, tmp_path):
    """Test that an empty library name is rejected without writing files."""
    result = runner.invoke(
        app, ["generate", str(library_file), "-o", str(tmp_path / "out"), "--name", ""]
    )

    assert result.exit_code == 1
    assert not (tmp_path / "out").exists()


def test_generate_missing_library(tmp_path):
    result = runner.invoke(app, ["generate", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_collect_prints_outputs(library_file):
    """Test that collect prints both artifacts without writing files."""
    result = runner.invoke(app, ["collect", str(library_file)])

    assert result.exit_code == 0
    assert '#include "shape.h"' in result.stdout
    assert "_Z7helperv" not in result.stdout
    assert result.stdout.endswith("_Z4areav\n_Z4sizev\n_Z8unit_box\n")
