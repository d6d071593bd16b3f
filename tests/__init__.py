"""
Test suite for the collateral core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
