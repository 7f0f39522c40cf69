"""
Test Suite for formnest.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Nested form declarations end to end
    - performance/: Large-input benchmarks
    - fixtures/: Shared configuration files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/formnest               # With coverage
"""
