"""
Core Module

Contains configuration management and application-wide constants.
"""
