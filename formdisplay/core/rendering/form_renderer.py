"""
Form Renderer
=============

Render configuration forms as indented plain text for console output.

Two views are supported:
- metadata: names, localized labels and help text, input types and type details
- values: localized labels followed by the current value of every input

Labels and help text are looked up in a ``StringTable``; a missing key propagates
to the caller. Output goes to any ``OutputSink`` (an object with ``write``).
"""

from typing import Any, Callable, Dict, Mapping, Protocol, Sequence, runtime_checkable

from formdisplay.config.logging import get_logger
from formdisplay.core.i18n.bundle import StringTable
from formdisplay.models.schemas import (
    EnumInput,
    Form,
    Framework,
    Input,
    InputType,
    IntegerInput,
    JobType,
    MapInput,
    StringInput,
)

logger = get_logger(__name__)

SENSITIVE_VALUE = "(This input is sensitive)"


@runtime_checkable
class OutputSink(Protocol):
    """Append-only text destination such as ``sys.stdout`` or ``io.StringIO``."""

    def write(self, text: str) -> Any:
        ...


def _type_name(value: Any) -> str:
    """Enum members print as their value, anything else as ``str``."""
    return str(getattr(value, "value", value))


class FormRenderer:
    """Plain-text renderer writing form metadata and values to an output sink."""

    def __init__(self, sink: OutputSink, bundle: StringTable) -> None:
        self.sink = sink
        self.bundle = bundle
        self.logger: Any = logger.bind(component="form_renderer")  # structlog.BoundLoggerBase
        self.value_renderers = self._setup_value_renderers()

    def _setup_value_renderers(self) -> Dict[InputType, Callable[[Any], None]]:
        """Setup value renderers keyed by input type."""
        return {
            InputType.STRING: self._render_string_value,
            InputType.INTEGER: self._render_integer_value,
            InputType.MAP: self._render_map_value,
            InputType.ENUM: self._render_enum_value,
        }

    # Framework metadata

    def render_framework(self, framework: Framework) -> None:
        """Render metadata of a framework aggregate."""
        self.render_framework_metadata(
            {job_type: job_forms.forms for job_type, job_forms in framework.all_job_forms.items()},
            framework.connection_forms.forms,
        )

    def render_framework_metadata(
        self, job_forms: Mapping[JobType, Sequence[Form]], connection_forms: Sequence[Form]
    ) -> None:
        """
        Render supported job types, connection forms and the forms of every job type.

        Args:
            job_forms: Forms per job type, rendered in mapping order
            connection_forms: Connection forms
        """
        self.logger.debug(
            "Rendering framework metadata",
            job_types=[_type_name(job_type) for job_type in job_forms],
            connection_forms=len(connection_forms),
        )

        job_type_names = ", ".join(_type_name(job_type) for job_type in job_forms)
        self._println(f"  Supported job types: [{job_type_names}]")

        self.render_forms_metadata(connection_forms, "Connection")

        for job_type, forms in job_forms.items():
            self._println(f"  Forms for job type {_type_name(job_type)}:")
            self.render_forms_metadata(forms, "Job")

    # Forms metadata

    def render_forms_metadata(self, forms: Sequence[Form], section_label: str) -> None:
        """
        Render names, localized labels, help text and input details of forms.

        Current input values are never printed.

        Args:
            forms: Forms to describe
            section_label: Prefix of every form header, e.g. ``Connection``
        """
        self.logger.debug("Rendering forms metadata", section=section_label, forms=len(forms))

        for form_index, form in enumerate(forms, start=1):
            self._println(f"    {section_label} form {form_index}:")
            self._println(f"      Name: {form.name}")
            self._println(f"      Label: {self._get_string(form.label_key)}")
            self._println(f"      Help: {self._get_string(form.help_key)}")

            for input_index, form_input in enumerate(form.inputs, start=1):
                self._render_input_metadata(form_input, input_index)

    def _render_input_metadata(self, form_input: Input, index: int) -> None:
        self._println(f"      Input {index}:")
        self._println(f"        Name: {form_input.name}")
        self._println(f"        Label: {self._get_string(form_input.label_key)}")
        self._println(f"        Help: {self._get_string(form_input.help_key)}")
        self._println(f"        Type: {_type_name(form_input.type)}")

        if isinstance(form_input, StringInput):
            self._println(f"        Mask: {str(form_input.masked).lower()}")
            self._println(f"        Size: {form_input.max_length}")
        elif isinstance(form_input, EnumInput):
            self._println(f"        Possible values: {','.join(form_input.values)}")

    # Form values

    def render_forms(self, forms: Sequence[Form]) -> None:
        """Render localized labels and current values of forms."""
        self.logger.debug("Rendering forms", forms=len(forms))

        for form in forms:
            self._render_form(form)

    def _render_form(self, form: Form) -> None:
        self._println(f"  {self._get_string(form.label_key)}")

        for form_input in form.inputs:
            self._print(f"    {self._get_string(form_input.label_key)}: ")
            if not form_input.is_empty:
                value_renderer = self.value_renderers.get(form_input.type)
                if value_renderer is None:
                    # Nothing else of this form is rendered after an unsupported input
                    self.logger.warning(
                        "Unsupported input type",
                        form=form.name,
                        input=form_input.name,
                        type=_type_name(form_input.type),
                    )
                    self._println(f"Unsupported data type {_type_name(form_input.type)}")
                    return
                value_renderer(form_input)
            self._println()

    def _render_string_value(self, form_input: StringInput) -> None:
        if form_input.masked:
            self._print(SENSITIVE_VALUE)
        else:
            self._print(form_input.value)

    def _render_integer_value(self, form_input: IntegerInput) -> None:
        self._print(str(form_input.value))

    def _render_map_value(self, form_input: MapInput) -> None:
        for key, value in form_input.value.items():
            self._println()
            self._print(f"      {key} = {value}")

    def _render_enum_value(self, form_input: EnumInput) -> None:
        self._print(form_input.value)

    # Helpers

    def _get_string(self, key: str) -> str:
        try:
            return self.bundle.get_string(key)
        except KeyError:
            self.logger.error("Missing localized string", key=key)
            raise

    def _print(self, text: str) -> None:
        self.sink.write(text)

    def _println(self, text: str = "") -> None:
        self.sink.write(f"{text}\n")


def render_framework_metadata(
    sink: OutputSink,
    job_forms: Mapping[JobType, Sequence[Form]],
    connection_forms: Sequence[Form],
    bundle: StringTable,
) -> None:
    """
    Render supported job types, connection forms and per-job-type forms metadata.

    Args:
        sink: Output destination
        job_forms: Forms per job type, rendered in mapping order
        connection_forms: Connection forms
        bundle: Localized strings for labels and help text
    """
    FormRenderer(sink, bundle).render_framework_metadata(job_forms, connection_forms)


def render_framework(sink: OutputSink, framework: Framework, bundle: StringTable) -> None:
    """Render metadata of a framework aggregate."""
    FormRenderer(sink, bundle).render_framework(framework)


def render_forms_metadata(
    sink: OutputSink, forms: Sequence[Form], section_label: str, bundle: StringTable
) -> None:
    """
    Render forms metadata under the given section label.

    Args:
        sink: Output destination
        forms: Forms to describe
        section_label: Prefix of every form header
        bundle: Localized strings for labels and help text
    """
    FormRenderer(sink, bundle).render_forms_metadata(forms, section_label)


def render_forms(sink: OutputSink, forms: Sequence[Form], bundle: StringTable) -> None:
    """
    Render localized labels and current values of forms.

    Args:
        sink: Output destination
        forms: Forms to display
        bundle: Localized strings for labels
    """
    FormRenderer(sink, bundle).render_forms(forms)
