"""
UI Layer

Qt-side glue for the desktop front-end. Importing this package requires PySide6.
"""
