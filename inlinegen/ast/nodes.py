"""Resolved C++ declaration graph.

These nodes describe a library that has already been parsed and resolved:
mangled names, access specifiers and template arguments are filled in by
whatever produced the graph. Nothing here parses C++.
"""

import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

# Headers with these suffixes hold internal details and are never exported.
PRIVATE_HEADER_SUFFIXES = ("_impl.h", "_p.h")


class AccessSpecifier(Enum):
    """C++ member access."""

    PUBLIC = auto()
    PROTECTED = auto()
    PRIVATE = auto()


# ====================
# Types
# ====================


@dataclass(eq=False)
class Type:
    """Base type node"""


@dataclass(eq=False)
class BuiltinType(Type):
    """Fundamental type such as ``int`` or ``double``."""

    name: str


@dataclass(eq=False)
class TagType(Type):
    """Reference to a class (or other tagged) declaration."""

    declaration: "Declaration"


@dataclass(eq=False)
class PointerType(Type):
    """Pointer or reference to another type."""

    pointee: Type
    modifier: str = "*"


@dataclass(eq=False)
class DependentNameType(Type):
    """Dependent name such as ``typename T::value_type``."""

    name: str


@dataclass(eq=False)
class TemplateParameterType(Type):
    """Bare template parameter such as ``T``."""

    name: str


@dataclass(eq=False)
class TemplateArgument:
    """A single argument of a template specialization.

    Attributes:
        type: Argument type, or None when it could not be resolved
        declaration: Declaration the argument refers to, if any
    """

    type: Type | None = None
    declaration: "Declaration | None" = None


@dataclass(eq=False)
class TemplateSpecializationType(Type):
    """Use of a class template with concrete arguments, e.g. ``Box<int>``."""

    template: "Declaration"
    arguments: list[TemplateArgument] = field(default_factory=list)


# ====================
# Declarations
# ====================


@dataclass(eq=False)
class Declaration:
    """Base declaration node.

    Attributes:
        name: Unqualified name
        access: Access specifier
        ignore: Excluded from the public surface by upstream policy
        namespace: Enclosing context, set when the declaration is added to one
    """

    name: str
    access: AccessSpecifier = AccessSpecifier.PUBLIC
    ignore: bool = False
    namespace: "DeclarationContext | None" = field(
        default=None, repr=False, compare=False
    )

    @property
    def qualified_name(self) -> str:
        parts = [self.name]
        context = self.namespace
        while context is not None and not isinstance(context, TranslationUnit):
            parts.append(context.name)
            context = context.namespace
        return "::".join(reversed(parts))

    @property
    def translation_unit(self) -> "TranslationUnit":
        """Return the unit this declaration was declared in."""
        node: Declaration | None = self
        while node is not None:
            if isinstance(node, TranslationUnit):
                return node
            node = node.namespace
        raise ValueError(f"Declaration {self.name} is not owned by a unit")


@dataclass(eq=False)
class DeclarationContext(Declaration):
    """Declaration that contains other declarations."""

    declarations: list[Declaration] = field(default_factory=list)

    def add(self, declaration: Declaration) -> Declaration:
        declaration.namespace = self
        self.declarations.append(declaration)
        return declaration


@dataclass(eq=False)
class Namespace(DeclarationContext):
    """C++ namespace."""


@dataclass(eq=False)
class Class(DeclarationContext):
    """Class, struct or class template.

    Attributes:
        bases: Base class types
    """

    bases: list[Type] = field(default_factory=list)


@dataclass(eq=False)
class TranslationUnit(DeclarationContext):
    """A parsed header.

    Attributes:
        file_path: Absolute path of the header
    """

    file_path: str = ""

    @property
    def file_name(self) -> str:
        return os.path.basename(self.file_path)

    @property
    def is_private_implementation(self) -> bool:
        return self.file_path.endswith(PRIVATE_HEADER_SUFFIXES)


@dataclass(eq=False)
class Parameter:
    name: str
    type: Type | None = None


@dataclass(eq=False)
class Function(Declaration):
    """Free function.

    Attributes:
        mangled: Linker symbol name
        return_type: Return type, None for void
        parameters: Function parameters
    """

    mangled: str = ""
    return_type: Type | None = None
    parameters: list[Parameter] = field(default_factory=list)


@dataclass(eq=False)
class Method(Function):
    """Member function.

    Attributes:
        is_override: Overrides a virtual function of a base class
    """

    is_override: bool = False


@dataclass(eq=False)
class Variable(Declaration):
    """Global variable or static data member."""

    mangled: str = ""
    type: Type | None = None


@dataclass(eq=False)
class Field(Declaration):
    """Non-static data member. Has no symbol of its own."""

    type: Type | None = None


@dataclass(eq=False)
class Typedef(Declaration):
    """Type alias declared with ``typedef`` or ``using``."""

    type: Type | None = None


class MangledDeclaration(Protocol):
    """Declaration that has a linker symbol (functions and variables)."""

    name: str
    mangled: str
    access: AccessSpecifier
    ignore: bool


@dataclass(eq=False)
class ASTContext:
    """The whole parsed library."""

    translation_units: list[TranslationUnit] = field(default_factory=list)

    def add_unit(self, file_path: str) -> TranslationUnit:
        unit = TranslationUnit(name=os.path.basename(file_path), file_path=file_path)
        self.translation_units.append(unit)
        return unit

    def find_unit(self, file_path: str) -> TranslationUnit | None:
        return next(
            (u for u in self.translation_units if u.file_path == file_path), None
        )
