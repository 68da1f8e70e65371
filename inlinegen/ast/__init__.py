"""Resolved C++ declaration graph, its visitor and type printer."""
