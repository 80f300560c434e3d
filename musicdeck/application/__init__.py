"""
Application Layer

Business operations invoked by the UI: library scanning and folder management.
"""
