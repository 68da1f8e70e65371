"""
Constants used by the inlines generator.
"""

# Attribute placed on explicit template instantiations in the aggregation unit
EXPORT_ATTRIBUTE = "__declspec(dllexport)"

# Default base name of the generated files
DEFAULT_INLINES_LIBRARY_NAME = "Inlines"
