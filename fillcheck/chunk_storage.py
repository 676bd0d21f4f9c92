"""Manages physical chunk files on disk: naming, write, streamed read."""

import errno
import os
from pathlib import Path
from typing import Iterator, Union

from common.constants import (
    CHUNK_FILE_EXTENSION,
    CHUNK_FILE_PREFIX,
    CHUNK_INDEX_WIDTH,
    STREAM_PIECE_SIZE_BYTES,
)
from common.exceptions import ConfigError

OUT_OF_SPACE_ERRNOS = frozenset(
    code for code in (errno.ENOSPC, getattr(errno, "EDQUOT", None)) if code is not None
)


def chunk_filename(index: int) -> str:
    """
    Get file name for a chunk index.

    Args:
        index: Zero-based chunk index

    Returns:
        File name such as chk_00007.bin

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"Chunk index must not be negative: {index}")
    return f"{CHUNK_FILE_PREFIX}{index:0{CHUNK_INDEX_WIDTH}d}{CHUNK_FILE_EXTENSION}"


def get_chunk_path(directory: Union[str, Path], index: int) -> Path:
    """Get file path for a chunk inside the target directory."""
    return Path(directory) / chunk_filename(index)


def ensure_directory_accessible(directory: Union[str, Path]) -> Path:
    """
    Check that the target directory exists and can be written and read.
    The directory is never created.

    Args:
        directory: Target directory

    Returns:
        Path object for the directory

    Raises:
        ConfigError: If the directory is missing or not accessible
    """
    path = Path(directory)
    if not path.is_dir() or not os.access(path, os.R_OK | os.W_OK | os.X_OK):
        raise ConfigError(f"{directory} is not accessible.")
    return path


def write_chunk(path: Path, data: bytes) -> None:
    """
    Write chunk data to disk, replacing any previous file.

    The data is flushed and synced so that a full device reports
    itself here rather than on close or later. If anything fails after
    the file was created, the partial file is removed.

    Args:
        path: Destination file path
        data: Raw chunk data

    Raises:
        OSError: If write operation fails
    """
    f = open(path, 'wb')
    try:
        with f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    except OSError:
        discard_chunk(path)
        raise


def discard_chunk(path: Path) -> bool:
    """
    Delete a chunk file, ignoring a file that is already gone.

    Returns:
        True if a file was deleted, False if it did not exist
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


def read_chunk_streaming(path: Path, piece_size: int = STREAM_PIECE_SIZE_BYTES) -> Iterator[bytes]:
    """
    Stream chunk data in pieces.

    Args:
        path: Chunk file path
        piece_size: Size of each piece in bytes

    Yields:
        Chunk data pieces

    Raises:
        FileNotFoundError: If chunk does not exist
        OSError: If read operation fails
    """
    with open(path, 'rb') as f:
        while True:
            piece = f.read(piece_size)
            if not piece:
                break
            yield piece


def is_out_of_space(error: BaseException) -> bool:
    """True if the error is the operating system's out-of-space signal."""
    return isinstance(error, OSError) and error.errno in OUT_OF_SPACE_ERRNOS
