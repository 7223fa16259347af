"""Shared fixtures for CLI tests."""

import pytest

from with_env.cli.app import create_cli_app
from with_env.pipeline import EnvPipeline
from with_env.process import ProcessRunner


@pytest.fixture
def mock_runner(mocker):
    """Provide a mocked ProcessRunner that reports success."""
    runner = mocker.Mock(spec=ProcessRunner)
    runner.run.return_value = 0
    return runner


@pytest.fixture
def app_with_mock_runner(mock_runner, test_settings):
    """CLI app whose pipeline never spawns a real process."""

    def pipeline_factory():
        return EnvPipeline(runner=mock_runner, ambient={"PATH": "/usr/bin"})

    return create_cli_app(settings=test_settings, pipeline_factory=pipeline_factory)


@pytest.fixture
def spawned(mock_runner):
    """Return the (command, environment) of the last spawn."""

    def _spawned():
        command, environment = mock_runner.run.call_args[0]
        return command, environment

    return _spawned


@pytest.fixture
def project(tmp_path, write_env):
    """A project directory with a root marker and layered env files."""
    root = tmp_path.resolve()
    (root / ".root").touch()
    write_env(root / ".env", "A=1\nNAME=base\n")
    write_env(root / ".env.production", "A=2\n")
    return root
