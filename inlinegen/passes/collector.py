"""
Collector of inline symbols and template instantiations.

Walks a resolved library once and records which functions and variables need
an explicit export from the inlines library, which template specializations
must be instantiated, and which headers the aggregation unit has to include.
"""

from loguru import logger

from inlinegen.ast.nodes import (
    AccessSpecifier,
    ASTContext,
    Function,
    MangledDeclaration,
    Method,
    TemplateSpecializationType,
    TranslationUnit,
    Variable,
)
from inlinegen.ast.printer import print_type
from inlinegen.ast.visitor import LibraryVisitor
from inlinegen.errors import TraversalError
from inlinegen.models import CollectedInlines
from inlinegen.passes.validator import are_template_arguments_valid
from inlinegen.symbols import SymbolLookup


def _is_access_valid(declaration: MangledDeclaration) -> bool:
    # Private overrides are still reached through the vtable.
    if declaration.access == AccessSpecifier.PRIVATE:
        return isinstance(declaration, Method) and declaration.is_override
    return True


class InlinesCollector(LibraryVisitor):
    """Library visitor accumulating headers, templates and mangled symbols.

    A collector is good for exactly one traversal: create a new one for every
    library walk.
    """

    def __init__(self, symbols: SymbolLookup):
        super().__init__()
        self.symbols = symbols
        self.current_unit: TranslationUnit | None = None
        self._collected = CollectedInlines()

    @property
    def collected(self) -> CollectedInlines:
        return self._collected

    def visit_TranslationUnit(self, node: TranslationUnit) -> None:  # noqa: N802
        self.current_unit = node
        super().visit_TranslationUnit(node)

    def visit_Function(self, node: Function) -> None:  # noqa: N802
        self._check_for_symbols(node)
        super().visit_Function(node)

    def visit_Method(self, node: Method) -> None:  # noqa: N802
        self._check_for_symbols(node)
        # Skip visit_Function so the symbol is checked only once.
        super().visit_Function(node)

    def visit_Variable(self, node: Variable) -> None:  # noqa: N802
        self._check_for_symbols(node)
        super().visit_Variable(node)

    def visit_TemplateSpecializationType(  # noqa: N802
        self, node: TemplateSpecializationType
    ) -> None:
        if self.already_visited(node):
            return

        if are_template_arguments_valid(node.arguments):
            type_string = print_type(node)
            if self._collected.add_template(type_string):
                logger.debug(f"Collected template instantiation: {type_string}")
                unit = self._unit()
                if not unit.is_private_implementation:
                    self._collected.add_header(unit.file_name)
                # Argument headers are needed even when they are internal.
                for argument in node.arguments:
                    if argument.declaration is not None:
                        header = argument.declaration.translation_unit.file_name
                        self._collected.add_header(header)
        else:
            logger.debug(
                f"Skipping template {node.template.qualified_name}: "
                "arguments are not instantiable"
            )

        super().visit_TemplateSpecializationType(node)

    def _check_for_symbols(self, declaration: MangledDeclaration) -> None:
        unit = self._unit()
        symbol = declaration.mangled
        if (
            not declaration.ignore
            and _is_access_valid(declaration)
            and not self.symbols.find_symbol(symbol)
            and not unit.is_private_implementation
        ):
            self._collected.add_header(unit.file_name)
            if self._collected.add_symbol(symbol):
                logger.debug(f"Collected inline symbol: {symbol} ({unit.file_name})")

    def _unit(self) -> TranslationUnit:
        if self.current_unit is None:
            raise TraversalError(
                "Collector visited a node outside a translation unit"
            )
        return self.current_unit


def collect_inlines(context: ASTContext, symbols: SymbolLookup) -> CollectedInlines:
    """Walk the whole library once and return what needs exporting.

    Args:
        context: Resolved library
        symbols: Symbols the library's object files already export

    Returns:
        Collected headers, templates and mangled symbols
    """
    collector = InlinesCollector(symbols)
    collector.visit_library(context)
    collected = collector.collected
    logger.info(
        f"Collected {len(collected.mangled_inlines)} inline symbols, "
        f"{len(collected.templates)} templates, {len(collected.headers)} headers"
    )
    return collected
