"""
Tests Module

Contains test suites for all application layers:
- unit: Unit tests for individual components
- integration: Scans of real directory trees built per test
"""
