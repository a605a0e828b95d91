"""
Data Models
===========

Pydantic data models describing configuration forms.

Models:
- schemas: forms, typed inputs and framework metadata
"""

from .schemas import (
    BooleanInput,
    ConnectionForms,
    EnumInput,
    Form,
    Framework,
    Input,
    InputType,
    IntegerInput,
    JobForms,
    JobType,
    MapInput,
    StringInput,
)

__all__ = [
    "BooleanInput",
    "ConnectionForms",
    "EnumInput",
    "Form",
    "Framework",
    "Input",
    "InputType",
    "IntegerInput",
    "JobForms",
    "JobType",
    "MapInput",
    "StringInput",
]
