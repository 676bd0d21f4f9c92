"""Custom exception classes for the probe."""

from typing import Optional

from common.constants import CHUNK_INDEX_WIDTH


def chunk_label(index: int) -> str:
    """Render a chunk index the way it appears in messages (e.g. #00007)."""
    return f"#{index:0{CHUNK_INDEX_WIDTH}d}"


class ProbeError(Exception):
    """
    Base exception class for all probe errors.
    """
    pass


class ConfigError(ProbeError):
    """
    Raised for malformed size expressions, out-of-range sizes and
    inaccessible target directories. Always raised before any write.
    """
    pass


class RandomSourceError(ProbeError):
    """
    Raised when the operating system random source is unavailable.
    """
    pass


class ChunkIOError(ProbeError):
    """
    Base for failures tied to a single chunk file.
    """

    def __init__(self, index: int, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.index = index
        self.cause = cause


class StorageExhaustedError(ChunkIOError):
    """
    Raised when a write fails because the device has no space left.
    Handled inside the write phase, never surfaces to the caller.
    """

    def __init__(self, index: int, cause: Optional[BaseException] = None):
        super().__init__(
            index,
            f"Failed to write chunk {chunk_label(index)}: No space left on device",
            cause,
        )


class WriteError(ChunkIOError):
    """
    Raised when a write fails for any reason other than lack of space.
    """

    def __init__(self, index: int, cause: Optional[BaseException] = None):
        reason = _describe(cause)
        super().__init__(index, f"Failed to write chunk {chunk_label(index)}: {reason}", cause)


class ReadError(ChunkIOError):
    """
    Raised when a written chunk cannot be read back.
    """

    def __init__(self, index: int, cause: Optional[BaseException] = None):
        reason = _describe(cause)
        super().__init__(index, f"Failed to read chunk {chunk_label(index)}: {reason}", cause)


class VerificationMismatchError(ChunkIOError):
    """
    Raised when the checksum of a re-read chunk differs from the one
    recorded when it was written.
    """

    def __init__(self, index: int, expected: str, actual: str):
        super().__init__(index, f"Verification failed for chunk {chunk_label(index)}")
        self.expected = expected
        self.actual = actual


def _describe(cause: Optional[BaseException]) -> str:
    if cause is None:
        return "unknown error"
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause) or type(cause).__name__
