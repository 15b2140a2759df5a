"""
Test suite for item-stack-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
