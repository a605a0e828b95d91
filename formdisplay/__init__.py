"""
Form Display
============

Console rendering of connector and job configuration forms.

This package provides:
- Read-only pydantic model of forms, typed inputs and framework metadata
- Localized string lookup through resource bundles
- Plain-text renderers for form metadata and current input values
"""

__version__ = "1.0.0"
__author__ = "Form Display Team"
