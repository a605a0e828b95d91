"""
Test Configuration
==================

Pytest configuration with fixtures for form rendering tests.
Provides test settings, sample form models, resource bundles and output sinks.
"""

import io
import os
from typing import List

import pytest

# Settings are read when logging is configured on first import
os.environ.setdefault("FORM_DISPLAY_ENVIRONMENT", "testing")

from pydantic_settings import SettingsConfigDict

from formdisplay.config.settings import Settings
from formdisplay.core.i18n.bundle import ResourceBundle
from formdisplay.core.rendering.form_renderer import FormRenderer
from formdisplay.models.schemas import Form, Framework

from tests.utils.data_generators import BundleDataGenerator, FormDataGenerator, all_forms


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture
def framework() -> Framework:
    """Sample framework metadata with IMPORT and EXPORT job forms."""
    return FormDataGenerator.generate_framework()


@pytest.fixture
def connection_forms() -> List[Form]:
    """Sample connection forms."""
    return [FormDataGenerator.generate_connection_form(properties={"a": "1", "b": "2"})]


@pytest.fixture
def bundle(framework: Framework) -> ResourceBundle:
    """Resource bundle covering every sample form, including the unsupported-input form."""
    forms = all_forms(framework) + [
        FormDataGenerator.generate_table_form(),
        FormDataGenerator.generate_form_with_unsupported_input(),
    ]
    return BundleDataGenerator.generate_bundle(forms)


@pytest.fixture
def renderer(sink: io.StringIO, bundle: ResourceBundle) -> FormRenderer:
    """Form renderer writing to the in-memory sink."""
    return FormRenderer(sink, bundle)
