"""SHA-256 fingerprints for chunk buffers and streamed chunk files."""

import hashlib
from typing import Iterable


def compute_checksum(data: bytes) -> str:
    """Fingerprint an in-memory buffer as a SHA-256 hex digest."""
    return hashlib.sha256(data).hexdigest()


class IncrementalChecksumCalculator:
    """
    Feed a chunk to SHA-256 piece by piece.

    Once finalize() has been called the digest is fixed and further
    updates are rejected.
    """

    def __init__(self):
        self._hasher = hashlib.sha256()
        self._digest = None

    def update(self, piece: bytes) -> None:
        if self._digest is not None:
            raise ValueError("Cannot update after finalization")
        self._hasher.update(piece)

    def finalize(self) -> str:
        if self._digest is None:
            self._digest = self._hasher.hexdigest()
        return self._digest


def compute_streaming_checksum(pieces: Iterable[bytes]) -> str:
    """
    Fingerprint a chunk delivered as a stream of pieces.

    Args:
        pieces: Byte pieces in file order

    Returns:
        SHA-256 hex digest, equal to compute_checksum() of the joined pieces
    """
    calculator = IncrementalChecksumCalculator()
    for piece in pieces:
        calculator.update(piece)
    return calculator.finalize()
