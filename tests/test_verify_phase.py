"""Tests for the verify phase controller."""

import logging
from unittest.mock import patch

import pytest

from common.exceptions import ReadError, VerificationMismatchError
from common.types import ChunkRecord, RunState
from fillcheck.checksum_validator import compute_checksum
from fillcheck.verify_phase import run_verify_phase, verify_chunk
from fillcheck.write_phase import run_write_phase


async def written_state(chunk_dir, count=3, chunk_size=256):
    state = RunState(requested_count=count, chunk_size=chunk_size)
    await run_write_phase(state, chunk_dir)
    return state


class TestVerifyChunk:
    """Test verification of a single chunk."""

    def test_matching_chunk(self, chunk_dir):
        (chunk_dir / 'chk_00000.bin').write_bytes(b'hello')
        record = ChunkRecord(index=0, checksum=compute_checksum(b'hello'))

        assert verify_chunk(chunk_dir, record) == record.checksum

    def test_mismatching_chunk(self, chunk_dir):
        (chunk_dir / 'chk_00002.bin').write_bytes(b'hellO')
        record = ChunkRecord(index=2, checksum=compute_checksum(b'hello'))

        with pytest.raises(VerificationMismatchError) as exc_info:
            verify_chunk(chunk_dir, record)

        assert exc_info.value.index == 2
        assert exc_info.value.expected == record.checksum
        assert exc_info.value.actual == compute_checksum(b'hellO')
        assert 'Verification failed for chunk #00002' in str(exc_info.value)

    def test_missing_chunk_is_read_error(self, chunk_dir):
        record = ChunkRecord(index=5, checksum=compute_checksum(b''))

        with pytest.raises(ReadError) as exc_info:
            verify_chunk(chunk_dir, record)

        assert exc_info.value.index == 5
        assert isinstance(exc_info.value.cause, FileNotFoundError)


class TestRunVerifyPhase:
    """Test the whole verify loop."""

    @pytest.mark.asyncio
    async def test_verifies_every_written_chunk(self, chunk_dir, reporter):
        state = await written_state(chunk_dir)

        verified = await run_verify_phase(state, chunk_dir, reporter)

        assert verified == 3
        assert state.files_verified == 3
        assert reporter.calls == [
            ('start', 3), ('update', 1), ('update', 2), ('update', 3), ('finish', None)
        ]

    @pytest.mark.asyncio
    async def test_only_written_chunks_are_checked(self, chunk_dir):
        state = RunState(requested_count=10, chunk_size=32)
        for index in range(2):
            data = bytes([index]) * 32
            (chunk_dir / f'chk_{index:05d}.bin').write_bytes(data)
            state.append_record(ChunkRecord(index=index, checksum=compute_checksum(data)))

        assert await run_verify_phase(state, chunk_dir) == 2

    @pytest.mark.asyncio
    async def test_detects_modified_chunk(self, chunk_dir, reporter):
        state = await written_state(chunk_dir)
        path = chunk_dir / 'chk_00001.bin'
        data = bytearray(path.read_bytes())
        data[100] ^= 0xFF
        path.write_bytes(bytes(data))

        with pytest.raises(VerificationMismatchError) as exc_info:
            await run_verify_phase(state, chunk_dir, reporter)

        assert exc_info.value.index == 1
        assert state.files_verified == 1
        assert reporter.calls[-1] == ('finish', None)

    @pytest.mark.asyncio
    async def test_detects_truncated_chunk(self, chunk_dir):
        state = await written_state(chunk_dir)
        path = chunk_dir / 'chk_00002.bin'
        path.write_bytes(path.read_bytes()[:-1])

        with pytest.raises(VerificationMismatchError) as exc_info:
            await run_verify_phase(state, chunk_dir)

        assert exc_info.value.index == 2

    @pytest.mark.asyncio
    async def test_detects_deleted_chunk(self, chunk_dir):
        state = await written_state(chunk_dir)
        (chunk_dir / 'chk_00000.bin').unlink()

        with pytest.raises(ReadError) as exc_info:
            await run_verify_phase(state, chunk_dir)

        assert exc_info.value.index == 0
        assert state.files_verified == 0

    @pytest.mark.asyncio
    async def test_logs_totals(self, chunk_dir, caplog):
        state = await written_state(chunk_dir, count=2, chunk_size=1024)

        with caplog.at_level(logging.DEBUG, logger='fillcheck'):
            await run_verify_phase(state, chunk_dir)

        assert 'Verified chunk #00001.' in caplog.text
        assert 'Verified 2 chunks, totalling 2KB data' in caplog.text

    @pytest.mark.asyncio
    async def test_runs_without_reporter(self, chunk_dir):
        state = await written_state(chunk_dir, count=2)

        with patch('fillcheck.verify_phase.NullProgressReporter') as null_reporter:
            assert await run_verify_phase(state, chunk_dir) == 2

        null_reporter.return_value.start.assert_called_once_with(2)
        null_reporter.return_value.finish.assert_called_once_with()
