"""Write phase: fills the target directory with random chunks until done or out of space."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from common.exceptions import StorageExhaustedError, WriteError, chunk_label
from common.sizes import format_file_size
from common.types import ChunkRecord, Exhausted, Fatal, RunState, Written, WriteOutcome
from fillcheck.checksum_validator import compute_checksum
from fillcheck.chunk_generator import generate_chunk
from fillcheck.chunk_storage import get_chunk_path, is_out_of_space, write_chunk
from fillcheck.reporting import NullProgressReporter, ProgressReporter

logger = logging.getLogger(__name__)


def attempt_write(directory: Path, index: int, chunk_size: int) -> WriteOutcome:
    """
    Generate, write and fingerprint one chunk.

    The checksum is taken from the in-memory buffer; only the verify
    phase reads the file back.

    Args:
        directory: Target directory
        index: Chunk index
        chunk_size: Chunk size in bytes

    Returns:
        Written, Exhausted or Fatal outcome

    Raises:
        RandomSourceError: If random data cannot be generated
    """
    data = generate_chunk(chunk_size)
    path = get_chunk_path(directory, index)
    try:
        write_chunk(path, data)
    except OSError as e:
        if is_out_of_space(e):
            return Exhausted(index=index, error=StorageExhaustedError(index, e))
        return Fatal(index=index, error=WriteError(index, e))
    return Written(index=index, checksum=compute_checksum(data))


def apply_outcome(state: RunState, outcome: WriteOutcome) -> bool:
    """
    Fold one write outcome into the run state.

    Args:
        state: Run state to update
        outcome: Result of attempt_write

    Returns:
        True to continue with the next chunk, False to stop writing

    Raises:
        WriteError: If the outcome is Fatal
    """
    if isinstance(outcome, Written):
        state.append_record(ChunkRecord(index=outcome.index, checksum=outcome.checksum))
        logger.debug(f"Wrote chunk {chunk_label(outcome.index)} with hash: {outcome.checksum}")
        return True
    if isinstance(outcome, Exhausted):
        logger.info(str(outcome.error))
        logger.info("No space left on device. Moving to verification...")
        return False
    if isinstance(outcome, Fatal):
        raise outcome.error from outcome.error.cause
    raise TypeError(f"Unknown write outcome: {outcome!r}")


async def run_write_phase(
    state: RunState,
    directory: Path,
    reporter: Optional[ProgressReporter] = None
) -> int:
    """
    Write chunks 0..N-1 one at a time until all are written or space runs out.

    Args:
        state: Run state holding requested count and chunk size
        directory: Target directory
        reporter: Progress collaborator

    Returns:
        Number of chunks written

    Raises:
        WriteError: On any write failure other than lack of space
        RandomSourceError: If random data cannot be generated
    """
    reporter = reporter or NullProgressReporter()
    loop = asyncio.get_running_loop()

    stopped: Optional[WriteOutcome] = None
    reporter.start(state.requested_count)
    try:
        for index in range(state.requested_count):
            outcome = await loop.run_in_executor(
                None, attempt_write, directory, index, state.chunk_size
            )
            if not isinstance(outcome, Written):
                stopped = outcome
                break
            apply_outcome(state, outcome)
            reporter.update(index + 1)
    finally:
        reporter.finish()

    # Reported only once the progress line is closed.
    if stopped is not None:
        apply_outcome(state, stopped)

    logger.info(
        f"Wrote {state.files_written} chunks, totalling {format_file_size(state.bytes_written)} data."
    )
    return state.files_written
