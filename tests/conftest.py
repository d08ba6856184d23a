"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, run configurations and sample Config Trees.
"""

import pytest
from pathlib import Path
from typing import Generator
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from renderkitdoc.config.settings import Settings
from renderkitdoc.config.logging import setup_logging
from renderkitdoc.core.rendering.pages import create_environment
from renderkitdoc.models.schemas import FacesConfig, RunConfig

from tests.utils.data_generators import RenderKitDataGenerator


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    output_directory: Path = Path("./test_target")
    locale_country_code: str = "us"
    impl_version_number: str = "2.3-test"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="RENDERKITDOC_TEST_")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override application settings for testing."""
    setup_logging(test_settings)
    with patch("renderkitdoc.config.settings.get_settings", return_value=test_settings), patch(
        "renderkitdoc.models.schemas.get_settings", return_value=test_settings
    ):
        yield test_settings


@pytest.fixture
def run_config() -> RunConfig:
    """Run configuration with a US locale and a version override."""
    return RunConfig(active_locale_country_code="us", version_string="2.3")


@pytest.fixture
def plain_run_config() -> RunConfig:
    """Run configuration without locale match or version."""
    return RunConfig(active_locale_country_code="", version_string=None)


@pytest.fixture
def jinja_env():
    """Shared page template environment."""
    return create_environment()


@pytest.fixture
def button_config() -> FacesConfig:
    """Single render-kit with one Button renderer."""
    return RenderKitDataGenerator.generate_button_kit()


@pytest.fixture
def html_basic_config() -> FacesConfig:
    """Multi-family HTML_BASIC render-kit."""
    return RenderKitDataGenerator.generate_html_basic()


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output directory for generation runs."""
    return tmp_path / "target"
