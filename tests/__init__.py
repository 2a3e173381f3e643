"""
Test suite for ModKit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
