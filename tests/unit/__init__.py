"""
Unit Tests Module

Contains unit tests for individual components:
- test_scanner: Extension classification and folder scanning
- test_file_system: Walker and path queries
- test_config: Configuration manager
- test_models: Value records and wire shapes
- test_workers: Qt background workers
"""
