"""
Test suite for the equivalency core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
