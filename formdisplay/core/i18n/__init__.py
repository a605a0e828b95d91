"""
Localization Module
===================

Key to localized string lookup for form labels and help text.
"""

from .bundle import BundleFormatError, MissingResourceError, ResourceBundle, StringTable

__all__ = ["BundleFormatError", "MissingResourceError", "ResourceBundle", "StringTable"]
