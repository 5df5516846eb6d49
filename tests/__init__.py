"""
Test suite for Lamination Algebra

Contains:
- tests/unit/          : Unit tests for individual modules
"""
