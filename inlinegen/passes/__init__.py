"""Traversal passes over the declaration graph."""

from inlinegen.passes.collector import InlinesCollector, collect_inlines
from inlinegen.passes.validator import are_template_arguments_valid

__all__ = ["InlinesCollector", "are_template_arguments_valid", "collect_inlines"]
