"""Shared pytest fixtures for all tests."""

import errno
import logging
from pathlib import Path

import pytest

from cli.config import ProbeConfig
from fillcheck import chunk_storage


class RecordingReporter:
    """Progress reporter that remembers every call."""

    def __init__(self):
        self.calls = []

    def start(self, total):
        self.calls.append(('start', total))

    def update(self, current):
        self.calls.append(('update', current))

    def finish(self):
        self.calls.append(('finish', None))


class RecordingPrompt:
    """Confirmation prompt that counts how often it was asked."""

    def __init__(self):
        self.messages = []

    async def confirm(self, message):
        self.messages.append(message)


@pytest.fixture(autouse=True)
def reset_fillcheck_logger():
    """
    Undo setup_logging between tests so caplog sees propagated records.
    """
    yield
    logger = logging.getLogger('fillcheck')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def chunk_dir(tmp_path):
    """
    Create an empty target directory for chunk files.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the directory
    """
    directory = tmp_path / 'chunks'
    directory.mkdir()
    return directory


@pytest.fixture
def make_config(chunk_dir):
    """
    Build ProbeConfig instances pointing at the chunk directory.

    Returns:
        Factory accepting ProbeConfig field overrides
    """
    def factory(**overrides):
        values = {
            'target_directory': str(chunk_dir),
            'chunk_count': 3,
            'chunk_size': '1K',
            'suppress_tmux_warning': True,
        }
        values.update(overrides)
        return ProbeConfig(**values)
    return factory


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def prompt():
    return RecordingPrompt()


@pytest.fixture
def fail_write_at():
    """
    Build a write_chunk replacement that raises OSError at one chunk index.

    Returns:
        Factory taking (index, errno code) and returning the replacement
    """
    real_write = chunk_storage.write_chunk

    def factory(index, code=errno.ENOSPC):
        failing_name = chunk_storage.chunk_filename(index)

        def write_chunk(path: Path, data: bytes) -> None:
            if path.name == failing_name:
                raise OSError(code, 'injected failure', str(path))
            real_write(path, data)
        return write_chunk
    return factory
