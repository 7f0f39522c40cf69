"""
Performance Tests.

Benchmarks for large inputs:
    - 100,000-value fieldset < 5 seconds
    - 2,000-child formset < 5 seconds
"""
