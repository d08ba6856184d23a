"""
Test Suite
==========

Test suite matching the renderkitdoc/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: End-to-end generation runs against a temporary directory
"""
