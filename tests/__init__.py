"""
Test suite for the adjusted Markowitz objective

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end scoring scenarios
"""
