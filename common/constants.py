"""Project-wide constants (chunk naming, size limits, defaults)."""

VERSION: str = "0.1.0"

CHUNK_FILE_PREFIX: str = "chk_"
CHUNK_FILE_EXTENSION: str = ".bin"
CHUNK_INDEX_WIDTH: int = 5

DEFAULT_CHUNK_COUNT: int = 1
DEFAULT_CHUNK_SIZE: str = "256M"
DEFAULT_TARGET_DIRECTORY: str = "."

STREAM_PIECE_SIZE_BYTES: int = 1024 * 1024  # 1 MiB read pieces during verify

MAX_SAFE_INTEGER: int = 2 ** 53 - 1

MULTIPLEXER_ENV_VARS: tuple[str, ...] = ("TMUX", "STY")
