"""
Test suite for matrices

Contains:
- tests/unit/          : Unit tests for individual modules
"""
