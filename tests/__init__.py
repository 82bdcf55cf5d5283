"""
Test suite for fraction-calc

Contains:
- tests/unit/          : Unit tests for core math, domain models, contracts and the driver
"""
