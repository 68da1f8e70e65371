"""
Loader for JSON descriptions of a resolved library.

The document lists translation units and their declarations with mangled
names and access already computed, for example::

    {
      "units": [
        {
          "file_path": "/usr/include/shape.h",
          "declarations": [
            {"kind": "function", "name": "area", "mangled": "_Z4areav",
             "return_type": {"kind": "builtin", "name": "double"}}
          ]
        }
      ]
    }

Types refer to declarations by qualified name (``"geo::Box"``). References
are resolved once every unit has been read, so a type may name a declaration
from a later unit.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from inlinegen.ast.nodes import (
    AccessSpecifier,
    ASTContext,
    BuiltinType,
    Class,
    Declaration,
    DeclarationContext,
    DependentNameType,
    Field,
    Function,
    Method,
    Namespace,
    Parameter,
    PointerType,
    TagType,
    TemplateArgument,
    TemplateParameterType,
    TemplateSpecializationType,
    Type,
    Typedef,
    Variable,
)
from inlinegen.errors import LibraryLoadError

_CONTEXT_KINDS: dict[str, type[DeclarationContext]] = {
    "namespace": Namespace,
    "class": Class,
}

# Declarations that only carry a type and never a symbol
_TYPED_KINDS: dict[str, type[Field | Typedef]] = {
    "field": Field,
    "typedef": Typedef,
}


class _LibraryBuilder:
    """Builds an ASTContext in two passes: declarations, then types."""

    def __init__(self, source: str | None):
        self.source = source
        self.context = ASTContext()
        self.declarations: dict[str, Declaration] = {}
        self.pending: list[Callable[[], None]] = []

    def error(self, message: str) -> LibraryLoadError:
        return LibraryLoadError(message, self.source)

    def build(self, data: Any) -> ASTContext:
        if not isinstance(data, dict) or not isinstance(data.get("units"), list):
            raise self.error("Library description must have a 'units' list")
        for raw_unit in data["units"]:
            file_path = raw_unit.get("file_path")
            if not file_path:
                raise self.error("Translation unit without 'file_path'")
            unit = self.context.add_unit(file_path)
            self._add_declarations(unit, raw_unit.get("declarations", []))
        # Types can only be built once every declaration is known.
        for resolve in self.pending:
            resolve()
        return self.context

    def _add_declarations(self, parent: DeclarationContext, items: list[Any]) -> None:
        for raw in items:
            declaration = self._create_declaration(raw)
            parent.add(declaration)
            self.declarations.setdefault(declaration.qualified_name, declaration)
            if isinstance(declaration, DeclarationContext):
                self._add_declarations(declaration, raw.get("declarations", []))

    def _create_declaration(self, raw: dict[str, Any]) -> Declaration:
        kind = raw.get("kind")
        name = raw.get("name")
        if not name:
            raise self.error(f"Declaration of kind '{kind}' without a name")
        common: dict[str, Any] = {
            "name": name,
            "access": self._access(raw.get("access", "public")),
            "ignore": bool(raw.get("ignore", False)),
        }

        if kind in _CONTEXT_KINDS:
            declaration = _CONTEXT_KINDS[kind](**common)
            if isinstance(declaration, Class):
                bases = raw.get("bases", [])
                self.pending.append(
                    lambda d=declaration: d.bases.extend(
                        self._type(b) for b in bases
                    )
                )
            return declaration

        if kind in ("function", "method"):
            function: Function
            if kind == "method":
                function = Method(
                    **common,
                    mangled=self._mangled(raw),
                    is_override=bool(raw.get("is_override", False)),
                )
            else:
                function = Function(**common, mangled=self._mangled(raw))
            self.pending.append(lambda f=function, r=raw: self._resolve_function(f, r))
            return function

        if kind == "variable":
            variable = Variable(**common, mangled=self._mangled(raw))
            self.pending.append(
                lambda v=variable, r=raw: setattr(v, "type", self._type(r.get("type")))
            )
            return variable

        if kind in _TYPED_KINDS:
            typed = _TYPED_KINDS[kind](**common)
            self.pending.append(
                lambda t=typed, r=raw: setattr(t, "type", self._type(r.get("type")))
            )
            return typed

        raise self.error(f"Unknown declaration kind: {kind}")

    def _resolve_function(self, function: Function, raw: dict[str, Any]) -> None:
        function.return_type = self._type(raw.get("return_type"))
        function.parameters = [
            Parameter(name=p.get("name", ""), type=self._type(p.get("type")))
            for p in raw.get("parameters", [])
        ]

    def _mangled(self, raw: dict[str, Any]) -> str:
        mangled = raw.get("mangled")
        if not mangled:
            raise self.error(f"Declaration {raw.get('name')} has no mangled name")
        return str(mangled)

    def _access(self, value: str) -> AccessSpecifier:
        try:
            return AccessSpecifier[str(value).upper()]
        except KeyError:
            raise self.error(f"Unknown access specifier: {value}") from None

    def _lookup(self, qualified_name: str) -> Declaration:
        declaration = self.declarations.get(qualified_name)
        if declaration is None:
            raise self.error(f"Reference to unknown declaration: {qualified_name}")
        return declaration

    def _type(self, raw: dict[str, Any] | None) -> Type | None:
        if raw is None:
            return None
        kind = raw.get("kind")
        match kind:
            case "builtin":
                return BuiltinType(raw["name"])
            case "tag":
                return TagType(self._lookup(raw["declaration"]))
            case "pointer":
                pointee = self._type(raw.get("pointee"))
                if pointee is None:
                    raise self.error("Pointer type without a pointee")
                return PointerType(pointee, raw.get("modifier", "*"))
            case "dependent":
                return DependentNameType(raw["name"])
            case "template_parameter":
                return TemplateParameterType(raw["name"])
            case "specialization":
                arguments = [
                    TemplateArgument(
                        type=self._type(a.get("type")),
                        declaration=(
                            self._lookup(a["declaration"])
                            if a.get("declaration")
                            else None
                        ),
                    )
                    for a in raw.get("arguments", [])
                ]
                return TemplateSpecializationType(
                    self._lookup(raw["template"]), arguments
                )
        raise self.error(f"Unknown type kind: {kind}")


def load_library_dict(data: Any, source: str | None = None) -> ASTContext:
    """Build a library from an already decoded description.

    Args:
        data: Decoded JSON document
        source: Name used in error messages

    Returns:
        Resolved library

    Raises:
        LibraryLoadError: If the description is malformed
    """
    try:
        return _LibraryBuilder(source).build(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise LibraryLoadError(f"Malformed library description: {e}", source) from e


def load_library(path: str | Path) -> ASTContext:
    """Read a library description from a JSON file.

    Raises:
        LibraryLoadError: If the file cannot be read or is malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise LibraryLoadError(
            f"Cannot read library description: {e}", str(path)
        ) from e
    except json.JSONDecodeError as e:
        raise LibraryLoadError(f"Invalid JSON: {e}", str(path)) from e

    context = load_library_dict(data, str(path))
    logger.info(
        f"Loaded {len(context.translation_units)} translation units from {path}"
    )
    return context
