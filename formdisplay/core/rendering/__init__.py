"""
Rendering Module
===============

Plain-text rendering of forms to console-like output sinks.

Components:
- form_renderer: form metadata and current value rendering
"""

from .form_renderer import (
    FormRenderer,
    OutputSink,
    render_framework,
    render_framework_metadata,
    render_forms,
    render_forms_metadata,
)

__all__ = [
    "FormRenderer",
    "OutputSink",
    "render_framework",
    "render_framework_metadata",
    "render_forms",
    "render_forms_metadata",
]
