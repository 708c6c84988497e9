"""
Test suite for time conductor

Contains:
- tests/unit/          : Unit tests for individual modules
"""
