"""Declaration graph visitor"""

from .nodes import (
    ASTContext,
    BuiltinType,
    Class,
    DeclarationContext,
    DependentNameType,
    Field,
    Function,
    Method,
    Namespace,
    PointerType,
    TagType,
    TemplateParameterType,
    TemplateSpecializationType,
    TranslationUnit,
    Type,
    Typedef,
    Variable,
)


class LibraryVisitor:
    """Base visitor walking every declaration and type of a library.

    Dispatch is by node class name, so ``Method`` nodes reach
    ``visit_Method`` and ``Variable`` nodes reach ``visit_Variable``.
    Subclasses override the hooks they care about and call the base
    implementation to keep walking.
    """

    def __init__(self) -> None:
        self._visited: set[int] = set()

    def visit(self, node: object) -> None:
        """Dispatch to appropriate visit method based on node type"""
        if node is None:
            return
        method_name = "visit_" + node.__class__.__name__
        visitor = getattr(self, method_name, self.generic_visit)
        visitor(node)

    def generic_visit(self, node: object) -> None:
        raise NotImplementedError(f"No visit_{node.__class__.__name__} method defined")

    def already_visited(self, node: object) -> bool:
        """Mark a node as visited, returning True if it had been seen before.

        Keyed by node identity and scoped to this visitor instance.
        """
        key = id(node)
        if key in self._visited:
            return True
        self._visited.add(key)
        return False

    def visit_library(self, context: ASTContext) -> None:
        for unit in context.translation_units:
            self.visit(unit)

    # ====================
    # Declarations
    # ====================

    def visit_declaration_context(self, context: DeclarationContext) -> None:
        for declaration in context.declarations:
            self.visit(declaration)

    def visit_TranslationUnit(self, node: TranslationUnit) -> None:  # noqa: N802
        self.visit_declaration_context(node)

    def visit_Namespace(self, node: Namespace) -> None:  # noqa: N802
        self.visit_declaration_context(node)

    def visit_Class(self, node: Class) -> None:  # noqa: N802
        for base in node.bases:
            self.visit(base)
        self.visit_declaration_context(node)

    def visit_Function(self, node: Function) -> None:  # noqa: N802
        self.visit(node.return_type)
        for parameter in node.parameters:
            self.visit(parameter.type)

    def visit_Method(self, node: Method) -> None:  # noqa: N802
        self.visit_Function(node)

    def visit_Variable(self, node: Variable) -> None:  # noqa: N802
        self.visit(node.type)

    def visit_Field(self, node: Field) -> None:  # noqa: N802
        self.visit(node.type)

    def visit_Typedef(self, node: Typedef) -> None:  # noqa: N802
        self.visit(node.type)

    # ====================
    # Types
    # ====================

    def visit_type(self, node: Type) -> None:
        pass

    def visit_BuiltinType(self, node: BuiltinType) -> None:  # noqa: N802
        self.visit_type(node)

    def visit_TagType(self, node: TagType) -> None:  # noqa: N802
        # The declaration is walked from its own unit.
        self.visit_type(node)

    def visit_PointerType(self, node: PointerType) -> None:  # noqa: N802
        self.visit(node.pointee)

    def visit_DependentNameType(self, node: DependentNameType) -> None:  # noqa: N802
        self.visit_type(node)

    def visit_TemplateParameterType(  # noqa: N802
        self, node: TemplateParameterType
    ) -> None:
        self.visit_type(node)

    def visit_TemplateSpecializationType(  # noqa: N802
        self, node: TemplateSpecializationType
    ) -> None:
        for argument in node.arguments:
            self.visit(argument.type)
