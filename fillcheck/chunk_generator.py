"""Generates random chunk payloads."""

import os

from common.exceptions import RandomSourceError


def generate_chunk(size: int) -> bytes:
    """
    Generate a buffer of cryptographically secure random bytes.

    Args:
        size: Number of bytes, must be positive

    Returns:
        Random bytes of exactly the requested size

    Raises:
        ValueError: If size is not positive
        RandomSourceError: If the OS random source is unavailable
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive: {size}")
    try:
        return os.urandom(size)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Random source unavailable: {e}") from e
