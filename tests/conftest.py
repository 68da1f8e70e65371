"""
Pytest configuration and shared fixtures.

The fixtures build small resolved libraries by hand, the way a parser front
end would hand them to the generator.
"""

import pytest

from inlinegen.ast.nodes import (
    AccessSpecifier,
    ASTContext,
    BuiltinType,
    Class,
    Function,
    TagType,
    TemplateArgument,
    TemplateSpecializationType,
)
from inlinegen.symbols import SymbolTable


@pytest.fixture
def empty_symbols():
    """Fixture providing a symbol table with nothing exported yet."""
    return SymbolTable()


@pytest.fixture
def shape_library():
    """Fixture providing a public and a private-implementation unit.

    shape.h declares ``area`` and shape_impl.h declares ``helper``, both
    eligible inline functions.
    """
    context = ASTContext()
    public = context.add_unit("/src/include/shape.h")
    public.add(
        Function(name="area", mangled="_Z4areav", return_type=BuiltinType("double"))
    )
    private = context.add_unit("/src/include/shape_impl.h")
    private.add(Function(name="helper", mangled="_Z7helperv"))
    return context


@pytest.fixture
def box_library():
    """Fixture providing ``Box<int>`` used from two units.

    box.h declares the ``Box`` template and a function returning ``Box<int>``;
    util.h declares another function returning ``Box<int>``.
    """
    context = ASTContext()
    box_h = context.add_unit("/src/include/box.h")
    box = box_h.add(Class(name="Box"))

    def box_of_int() -> TemplateSpecializationType:
        return TemplateSpecializationType(
            box, [TemplateArgument(type=BuiltinType("int"))]
        )

    box_h.add(
        Function(name="make_box", mangled="_Z8make_boxv", return_type=box_of_int())
    )
    util_h = context.add_unit("/src/include/util.h")
    util_h.add(
        Function(
            name="default_box", mangled="_Z11default_boxv", return_type=box_of_int()
        )
    )
    return context


@pytest.fixture
def widget_library():
    """Fixture providing a public ``Widget`` class and a private ``Detail`` class.

    Both live in widget.h; the ``Holder`` template lives in holder.h.
    """
    context = ASTContext()
    widget_h = context.add_unit("/src/include/widget.h")
    widget = widget_h.add(Class(name="Widget"))
    detail = widget_h.add(Class(name="Detail", access=AccessSpecifier.PRIVATE))
    holder_h = context.add_unit("/src/include/holder.h")
    holder = holder_h.add(Class(name="Holder"))
    return {
        "context": context,
        "widget": widget,
        "detail": detail,
        "holder": holder,
        "widget_type": TagType(widget),
        "detail_type": TagType(detail),
    }
