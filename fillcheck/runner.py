"""Runs a full probe: configuration checks, write phase, verify phase, summary."""

import asyncio
import logging
from typing import Optional

from common.exceptions import ConfigError
from common.sizes import parse_file_size
from common.types import RunState, RunSummary
from fillcheck.chunk_storage import ensure_directory_accessible
from fillcheck.reporting import (
    ConfirmationPrompt,
    NullConfirmationPrompt,
    NullProgressReporter,
    ProgressReporter,
    inside_multiplexer,
)
from fillcheck.summary import build_summary, render_summary
from fillcheck.verify_phase import run_verify_phase
from fillcheck.write_phase import run_write_phase

logger = logging.getLogger(__name__)

MULTIPLEXER_WARNING = "It seems that you are NOT inside a tmux or screen session!!"


async def run_probe(
    config,
    reporter: Optional[ProgressReporter] = None,
    prompt: Optional[ConfirmationPrompt] = None,
    environ=None
) -> RunSummary:
    """
    Execute one probe run.

    Args:
        config: ProbeConfig-like object (target_directory, chunk_count,
            chunk_size, suppress_tmux_warning)
        reporter: Progress collaborator, shared by both phases
        prompt: Confirmation collaborator, asked at most once
        environ: Environment used for multiplexer detection

    Returns:
        RunSummary of a full or partial success

    Raises:
        ConfigError: Bad size expression or inaccessible directory
        WriteError: Write failed for a reason other than lack of space
        ReadError: A written chunk could not be read back
        VerificationMismatchError: A written chunk came back different
    """
    reporter = reporter or NullProgressReporter()
    prompt = prompt or NullConfirmationPrompt()

    chunk_size = parse_file_size(config.chunk_size)
    if chunk_size <= 0:
        raise ConfigError(f"Chunk size must be positive: {config.chunk_size}")
    directory = ensure_directory_accessible(config.target_directory)

    if not config.suppress_tmux_warning and not inside_multiplexer(environ):
        logger.info(MULTIPLEXER_WARNING)
        await prompt.confirm(MULTIPLEXER_WARNING)

    state = RunState(requested_count=config.chunk_count, chunk_size=chunk_size)
    logger.debug(
        f"Writing {state.requested_count} chunks of {chunk_size} bytes to {directory}"
    )

    await run_write_phase(state, directory, reporter)
    await run_verify_phase(state, directory, reporter)

    summary = build_summary(state)
    for line in render_summary(summary):
        logger.info(line)
    return summary


def probe(config, reporter=None, prompt=None) -> RunSummary:
    """Synchronous entry point around run_probe."""
    return asyncio.run(run_probe(config, reporter=reporter, prompt=prompt))
