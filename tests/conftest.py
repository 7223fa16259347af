"""Pytest configuration and fixtures for with-env tests."""

import typing as t
from pathlib import Path

import loguru
import pytest
from typer.testing import CliRunner

from with_env.cli.app import create_cli_app
from with_env.config.settings import LogLevel, Settings
from with_env.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def isolated_environment_name(monkeypatch):
    """Keep the developer's ENVIRONMENT/ENV/NODE_ENV out of the tests."""
    for name in ("ENVIRONMENT", "ENV", "NODE_ENV"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(log_level=LogLevel.CRITICAL)


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    return mocker.Mock(spec=loguru.logger)


@pytest.fixture
def write_env():
    """Write an env file, creating parent directories as needed."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_tree(tmp_path, write_env) -> t.Iterator[dict[str, Path]]:
    """Provide a nested project with a root marker and env files per level.

    Layout::

        tmp/outer/.env                 OUTER=1, SHARED=outer
        tmp/outer/project/.root
        tmp/outer/project/.env         PROJECT=1, SHARED=project
        tmp/outer/project/app/.env     APP=1, SHARED=app
        tmp/outer/project/app/src/     (no env files)
    """
    outer = tmp_path.resolve() / "outer"
    project = outer / "project"
    app = project / "app"
    src = app / "src"
    src.mkdir(parents=True)

    write_env(outer / ".env", "OUTER=1\nSHARED=outer\n")
    write_env(project / ".env", "PROJECT=1\nSHARED=project\n")
    (project / ".root").touch()
    write_env(app / ".env", "APP=1\nSHARED=app\n")

    yield {"outer": outer, "project": project, "app": app, "src": src}


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
