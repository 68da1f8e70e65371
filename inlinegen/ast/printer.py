"""Canonical C++ spelling of types.

The printed form of a template specialization doubles as its identity when
collecting explicit instantiations, so it must be stable for equal types.
"""

from inlinegen.ast.nodes import (
    BuiltinType,
    DependentNameType,
    PointerType,
    TagType,
    TemplateArgument,
    TemplateParameterType,
    TemplateSpecializationType,
    Type,
)


def print_type(type_: Type) -> str:
    """Return the C++ spelling of a type.

    Args:
        type_: Type node to print

    Returns:
        Type as it would be written in source, e.g. ``ns::Box<int*>``
    """
    match type_:
        case BuiltinType(name=name):
            return name
        case TagType(declaration=declaration):
            return declaration.qualified_name
        case PointerType(pointee=pointee, modifier=modifier):
            return f"{print_type(pointee)}{modifier}"
        case DependentNameType(name=name) | TemplateParameterType(name=name):
            return name
        case TemplateSpecializationType(template=template, arguments=arguments):
            args = ", ".join(_print_argument(a) for a in arguments)
            return f"{template.qualified_name}<{args}>"
    raise TypeError(f"Cannot print type node {type_.__class__.__name__}")


def _print_argument(argument: TemplateArgument) -> str:
    if argument.type is not None:
        return print_type(argument.type)
    if argument.declaration is not None:
        return argument.declaration.qualified_name
    return "?"
