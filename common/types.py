"""Shared data type definitions (ChunkRecord, RunState, write outcomes, RunSummary)."""

from dataclasses import dataclass, field
from typing import List, Union

from common.exceptions import StorageExhaustedError, WriteError


@dataclass(frozen=True)
class ChunkRecord:
    """
    Fingerprint of one successfully written chunk.
    """
    index: int
    checksum: str


@dataclass
class RunState:
    """
    Mutable state of a single probe run.

    Only the write phase appends records and only the verify phase
    advances files_verified; the two never run at the same time.
    """
    requested_count: int
    chunk_size: int
    records: List[ChunkRecord] = field(default_factory=list)
    files_verified: int = 0

    @property
    def files_written(self) -> int:
        return len(self.records)

    @property
    def bytes_written(self) -> int:
        return self.files_written * self.chunk_size

    @property
    def bytes_verified(self) -> int:
        return self.files_verified * self.chunk_size

    def append_record(self, record: ChunkRecord) -> None:
        """
        Append the record for the next chunk index.

        Raises:
            ValueError: If the record does not continue the index sequence
        """
        if record.index != self.files_written:
            raise ValueError(
                f"Expected record for chunk {self.files_written}, got {record.index}"
            )
        self.records.append(record)

    def record_for(self, index: int) -> ChunkRecord:
        return self.records[index]


@dataclass(frozen=True)
class Written:
    """The chunk was written and fingerprinted."""
    index: int
    checksum: str


@dataclass(frozen=True)
class Exhausted:
    """The device refused the write because it ran out of space."""
    index: int
    error: StorageExhaustedError


@dataclass(frozen=True)
class Fatal:
    """The write failed for a reason that aborts the run."""
    index: int
    error: WriteError


WriteOutcome = Union[Written, Exhausted, Fatal]


@dataclass(frozen=True)
class RunSummary:
    """
    Final counters of a run.
    """
    requested_count: int
    chunk_size: int
    files_written: int
    files_verified: int

    @property
    def bytes_written(self) -> int:
        return self.files_written * self.chunk_size

    @property
    def bytes_verified(self) -> int:
        return self.files_verified * self.chunk_size

    @property
    def complete(self) -> bool:
        return self.files_written == self.requested_count

    @property
    def status_message(self) -> str:
        if self.complete:
            return "All chunks have been written and verified successfully"
        return "Partly done, some chunks have errors."
