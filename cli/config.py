"""Run configuration for the fillcheck CLI."""

import os

from pydantic import BaseModel, Field

from common.constants import DEFAULT_CHUNK_COUNT, DEFAULT_CHUNK_SIZE, DEFAULT_TARGET_DIRECTORY
from common.logging_config import Verbosity


def default_chunk_size() -> str:
    """Default chunk size expression, overridable with FILLCHECK_CHUNK_SIZE."""
    return os.environ.get("FILLCHECK_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)


class ProbeConfig(BaseModel):
    """Validated options for one probe run."""
    target_directory: str = DEFAULT_TARGET_DIRECTORY
    chunk_count: int = Field(default=DEFAULT_CHUNK_COUNT, ge=0)
    chunk_size: str = Field(default_factory=default_chunk_size, min_length=1)
    quiet: bool = False
    verbose: bool = False
    progress_bar: bool = True
    suppress_tmux_warning: bool = False

    @property
    def verbosity(self) -> Verbosity:
        return Verbosity.from_flags(quiet=self.quiet, verbose=self.verbose)
