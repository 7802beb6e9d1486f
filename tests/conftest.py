"""
Pytest configuration and fixtures for Slackhook tests.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def package_logger_propagates() -> Iterator[None]:
    """
    Undo setup_logging between tests.

    setup_logging turns propagation off, which would hide records from caplog.
    """
    yield
    package_logger = logging.getLogger("slackhook")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)

    transport_logger = logging.getLogger("urllib3")
    transport_logger.handlers.clear()
    transport_logger.propagate = True
    transport_logger.setLevel(logging.NOTSET)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Empty operator template directory."""
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """Factory for mock requests.Session objects whose POST answers with a body."""
    def factory(text: bytes | None = b"ok", status_code: int = 200) -> MagicMock:
        response = MagicMock()
        response.content = text
        response.status_code = status_code
        session = MagicMock()
        session.post.return_value = response
        return session
    return factory
