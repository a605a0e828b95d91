"""
Pydantic Models and Schemas
===========================

Read-only model of configuration forms: typed inputs grouped into named forms,
and the framework aggregate holding the connection forms plus per-job-type forms.

Inputs form a tagged union discriminated on ``type``. Label and help keys are
derived from element names (``<name>.label`` / ``<name>.help``) and resolved
against a resource bundle at render time.
"""

from typing import Optional, List, Dict, Union, Literal, Any, Annotated
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.types import StrictBool, StrictInt, StrictStr


# Enums
class InputType(str, Enum):
    """Input value types."""
    STRING = "STRING"
    INTEGER = "INTEGER"
    MAP = "MAP"
    ENUM = "ENUM"
    BOOLEAN = "BOOLEAN"


class JobType(str, Enum):
    """Job types supported by the framework."""
    IMPORT = "IMPORT"
    EXPORT = "EXPORT"


# Base Models
class NamedElement(BaseModel):
    """Base model for anything carrying a name and localized label/help."""
    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(..., min_length=1, description="Element name")

    @property
    def label_key(self) -> str:
        return f"{self.name}.label"

    @property
    def help_key(self) -> str:
        return f"{self.name}.help"


class BaseInput(NamedElement):
    """Common input fields. Subclasses narrow ``type`` and ``value``."""
    type: InputType
    value: Any = None

    @property
    def is_empty(self) -> bool:
        return self.value is None


# Input Models
class StringInput(BaseInput):
    """String input; masked values are sensitive and never displayed."""
    type: Literal[InputType.STRING] = InputType.STRING
    masked: StrictBool = Field(False, description="Hide value when displayed")
    max_length: StrictInt = Field(..., gt=0, description="Maximum value length")
    value: Optional[StrictStr] = None


class IntegerInput(BaseInput):
    """Integer input."""
    type: Literal[InputType.INTEGER] = InputType.INTEGER
    value: Optional[StrictInt] = None


class MapInput(BaseInput):
    """String to string map input; entry order is preserved."""
    type: Literal[InputType.MAP] = InputType.MAP
    value: Optional[Dict[StrictStr, StrictStr]] = None


class EnumInput(BaseInput):
    """Enumeration input with an ordered set of legal values."""
    type: Literal[InputType.ENUM] = InputType.ENUM
    values: List[StrictStr] = Field(..., min_length=1, description="Legal values")
    value: Optional[StrictStr] = None

    @model_validator(mode="after")
    def validate_selected_value(self) -> "EnumInput":
        if self.value is not None and self.value not in self.values:
            raise ValueError(
                f"Value {self.value} of input {self.name} is not one of {','.join(self.values)}"
            )
        return self


class BooleanInput(BaseInput):
    """Boolean input."""
    type: Literal[InputType.BOOLEAN] = InputType.BOOLEAN
    value: Optional[StrictBool] = None


Input = Annotated[
    Union[StringInput, IntegerInput, MapInput, EnumInput, BooleanInput],
    Field(discriminator="type"),
]


# Form Models
class Form(NamedElement):
    """Named, ordered group of inputs."""
    inputs: List[Input] = Field(default_factory=list, description="Form inputs")


class ConnectionForms(BaseModel):
    """Forms describing a connection."""
    model_config = ConfigDict(frozen=True)

    forms: List[Form] = Field(default_factory=list)


class JobForms(BaseModel):
    """Forms describing a job of a given type."""
    model_config = ConfigDict(frozen=True)

    type: JobType = Field(..., description="Job type")
    forms: List[Form] = Field(default_factory=list)


class Framework(BaseModel):
    """Framework metadata: connection forms plus forms for every job type."""
    model_config = ConfigDict(frozen=True)

    connection_forms: ConnectionForms = Field(default_factory=ConnectionForms)
    job_forms: Dict[JobType, JobForms] = Field(
        default_factory=dict, description="Job forms keyed by job type, in display order"
    )

    @model_validator(mode="after")
    def validate_job_types(self) -> "Framework":
        for job_type, forms in self.job_forms.items():
            if forms.type != job_type:
                raise ValueError(
                    f"Job forms of type {forms.type.value} registered under {job_type.value}"
                )
        return self

    @property
    def all_job_forms(self) -> Dict[JobType, JobForms]:
        return self.job_forms

    def get_job_forms(self, job_type: JobType) -> Optional[JobForms]:
        return self.job_forms.get(job_type)
