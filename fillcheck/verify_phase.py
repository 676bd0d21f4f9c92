"""Verify phase: reads every written chunk back and compares checksums."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from common.exceptions import ReadError, VerificationMismatchError, chunk_label
from common.sizes import format_file_size
from common.types import ChunkRecord, RunState
from fillcheck.checksum_validator import compute_streaming_checksum
from fillcheck.chunk_storage import get_chunk_path, read_chunk_streaming
from fillcheck.reporting import NullProgressReporter, ProgressReporter

logger = logging.getLogger(__name__)


def verify_chunk(directory: Path, record: ChunkRecord) -> str:
    """
    Re-read a chunk from storage and check it against its record.

    Args:
        directory: Target directory
        record: Record made when the chunk was written

    Returns:
        Checksum of the file as read back

    Raises:
        ReadError: If the file cannot be read
        VerificationMismatchError: If the checksum differs
    """
    path = get_chunk_path(directory, record.index)
    try:
        actual = compute_streaming_checksum(read_chunk_streaming(path))
    except OSError as e:
        raise ReadError(record.index, e) from e

    if actual != record.checksum:
        raise VerificationMismatchError(record.index, record.checksum, actual)
    return actual


async def run_verify_phase(
    state: RunState,
    directory: Path,
    reporter: Optional[ProgressReporter] = None
) -> int:
    """
    Verify chunks 0..files_written-1 in order.

    Only chunks that were actually written are checked, never the
    originally requested count.

    Args:
        state: Run state populated by the write phase
        directory: Target directory
        reporter: Progress collaborator

    Returns:
        Number of chunks verified

    Raises:
        VerificationMismatchError: On the first corrupted chunk
        ReadError: If a chunk cannot be read back
    """
    reporter = reporter or NullProgressReporter()
    loop = asyncio.get_running_loop()
    total = state.files_written

    reporter.start(total)
    try:
        for index in range(total):
            record = state.record_for(index)
            await loop.run_in_executor(None, verify_chunk, directory, record)
            state.files_verified += 1
            logger.debug(f"Verified chunk {chunk_label(index)}.")
            reporter.update(index + 1)
    finally:
        reporter.finish()

    logger.info(
        f"Verified {state.files_verified} chunks, totalling {format_file_size(state.bytes_verified)} data"
    )
    return state.files_verified
