"""
Test Suite
==========

Test suite matching the formdisplay/ package structure.

Test Categories:
- unit: Unit tests for models, resource bundles, configuration and renderers
"""
