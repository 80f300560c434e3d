"""
UI Utilities

Qt helpers shared by the GUI.
"""
