"""Interfaces for the progress and confirmation collaborators, with no-op versions."""

import os
from typing import Mapping, Optional, Protocol

from common.constants import MULTIPLEXER_ENV_VARS


class ProgressReporter(Protocol):
    """Receives (total, current) updates for one phase at a time."""

    def start(self, total: int) -> None: ...

    def update(self, current: int) -> None: ...

    def finish(self) -> None: ...


class ConfirmationPrompt(Protocol):
    """Asks the user to acknowledge a warning before the run continues."""

    async def confirm(self, message: str) -> None: ...


class NullProgressReporter:
    """Progress reporter that renders nothing."""

    def start(self, total: int) -> None:
        pass

    def update(self, current: int) -> None:
        pass

    def finish(self) -> None:
        pass


class NullConfirmationPrompt:
    """Prompt that continues without asking."""

    async def confirm(self, message: str) -> None:
        pass


def inside_multiplexer(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Check whether the process runs inside tmux or GNU screen.

    Args:
        environ: Environment mapping, defaults to os.environ

    Returns:
        True if any multiplexer variable is set
    """
    if environ is None:
        environ = os.environ
    return any(environ.get(name) is not None for name in MULTIPLEXER_ENV_VARS)
