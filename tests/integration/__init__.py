"""
Integration Tests Module

Exercises the library service and bootstrap against temporary directories.
"""
