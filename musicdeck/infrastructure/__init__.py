"""
Infrastructure Layer

Filesystem access used by the application layer.
"""
