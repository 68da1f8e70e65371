"""Checks that a template specialization can be instantiated on its own."""

from collections.abc import Iterable

from inlinegen.ast.nodes import (
    AccessSpecifier,
    DependentNameType,
    TemplateArgument,
    TemplateParameterType,
    TemplateSpecializationType,
)


def are_template_arguments_valid(arguments: Iterable[TemplateArgument]) -> bool:
    """Return True if every argument is concrete and visible outside the library.

    An argument is rejected when its type is unresolved, a dependent name or a
    bare template parameter, or when it refers to an ignored or private
    declaration. Arguments that are themselves specializations are checked
    recursively.

    Args:
        arguments: Template arguments of a specialization

    Returns:
        True if an explicit instantiation with these arguments would compile
    """
    for argument in arguments:
        type_ = argument.type
        if type_ is None or isinstance(
            type_, DependentNameType | TemplateParameterType
        ):
            return False
        declaration = argument.declaration
        if declaration is not None and (
            declaration.ignore or declaration.access == AccessSpecifier.PRIVATE
        ):
            return False
        if isinstance(
            type_, TemplateSpecializationType
        ) and not are_template_arguments_valid(type_.arguments):
            return False
    return True
