"""
Shared fixtures for CLI tests.

The CLI resolves everything through the global container, so these
fixtures point it at test settings and a fake transport and restore it
afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from tests.factories.fakes import FakeTransport
from tubesearch.config.settings import Settings
from tubesearch.container import container


@pytest.fixture
def runner() -> CliRunner:
    """CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_transport(
    monkeypatch: pytest.MonkeyPatch, mock_settings: Settings
) -> Iterator[FakeTransport]:
    """Fake transport wired into the global container."""
    cli_settings = mock_settings.model_copy(update={"log_level": "WARNING"})
    monkeypatch.setattr(container, "_settings", cli_settings)
    container.reset()

    transport = FakeTransport()
    container.transport = transport  # type: ignore[misc]

    yield transport

    container.reset()
    logger = logging.getLogger("tubesearch")
    for handler in list(logger.handlers):
        if getattr(handler, "_tubesearch_cli", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
