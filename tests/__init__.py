"""
Test suite for asset-id display line generator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
