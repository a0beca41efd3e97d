import pytest
from click.testing import CliRunner

from reflow_list.config import ReflowConfig, compile_settings


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def settings():
    """Compiled default settings."""
    return compile_settings(ReflowConfig())
