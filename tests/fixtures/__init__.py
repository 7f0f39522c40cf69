"""
Test Fixtures - Shared Configurations.

This package contains reusable test data:
    - sample_config.yaml: Base configuration
    - sample_config.strict.yaml: "strict" profile overlay for sample_config.yaml

Usage:
    Reach the files through the fixtures_path fixture in conftest.py.
"""
