"""
Test suite for field-linear

Contains:
- tests/unit/          : Unit tests for fields, vectors, matrices, builders and contracts
"""
