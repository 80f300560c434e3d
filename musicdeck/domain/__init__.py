"""
Domain Layer

Core value records and exceptions, independent of filesystem and UI code.
"""
