from inlinegen.ast.loader import load_library, load_library_dict
from inlinegen.config import CppAbi, InlinesOptions
from inlinegen.generator import generate_inlines
from inlinegen.models import CollectedInlines, InlinesResult
from inlinegen.passes.collector import collect_inlines
from inlinegen.symbols import SymbolTable

__version__ = "0.1.0"


__all__ = [
    "CollectedInlines",
    "CppAbi",
    "InlinesOptions",
    "InlinesResult",
    "SymbolTable",
    "collect_inlines",
    "generate_inlines",
    "load_library",
    "load_library_dict",
]
