"""
Core Business Logic
==================

Core modules for turning form models into console output.

Modules:
- i18n: resource bundles used to resolve labels and help text
- rendering: plain-text form renderers
"""
