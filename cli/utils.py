"""Utility classes for CLI rendering."""

import sys
from typing import Optional, TextIO

from cli.constants import GREEN, PROGRESS_BAR_WIDTH, RESET


class TerminalProgressBar:
    """Single-line progress bar redrawn in place with carriage returns."""

    def __init__(self, stream: Optional[TextIO] = None, width: int = PROGRESS_BAR_WIDTH):
        """
        Initialize the progress bar.

        Args:
            stream: Output stream, defaults to stderr at render time
            width: Number of cells in the bar
        """
        self._stream = stream
        self.width = width
        self.total = 0
        self.current = 0
        self._active = False

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stderr

    def start(self, total: int) -> None:
        self.total = total
        self.current = 0
        self._active = True
        self._display_progress()

    def update(self, current: int) -> None:
        if not self._active:
            return
        self.current = current
        self._display_progress()

    def finish(self) -> None:
        """Finalize progress display with newline."""
        if not self._active:
            return
        self._active = False
        self.stream.write('\n')
        self.stream.flush()

    def _display_progress(self) -> None:
        fraction = (self.current / self.total) if self.total else 1.0
        filled = int(round(fraction * self.width))
        bar = '█' * filled + '░' * (self.width - filled)
        self.stream.write(
            f"\r{bar} {GREEN}{fraction * 100:.0f}%{RESET} | {self.current}/{self.total}"
        )
        self.stream.flush()

    def __enter__(self) -> 'TerminalProgressBar':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.finish()
