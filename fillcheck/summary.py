"""Builds and renders the end-of-run summary."""

from common.sizes import format_file_size
from common.types import RunState, RunSummary


def build_summary(state: RunState) -> RunSummary:
    """Snapshot the final counters of a run."""
    return RunSummary(
        requested_count=state.requested_count,
        chunk_size=state.chunk_size,
        files_written=state.files_written,
        files_verified=state.files_verified,
    )


def render_summary(summary: RunSummary) -> list[str]:
    """
    Render the summary as report lines.

    A summary is only rendered once every written chunk was verified;
    anything else is a failed run and must not look like a result.

    Args:
        summary: Final counters

    Returns:
        Lines for written, verified and overall status

    Raises:
        ValueError: If some written chunks were not verified
    """
    if summary.files_verified != summary.files_written:
        raise ValueError(
            f"Cannot summarize run: {summary.files_verified} of "
            f"{summary.files_written} written chunks verified"
        )

    return [
        f"Chunks written: {summary.files_written}/{summary.requested_count} "
        f"({format_file_size(summary.bytes_written)})",
        f"Chunks verified: {summary.files_verified}/{summary.files_written} "
        f"({format_file_size(summary.bytes_verified)})",
        summary.status_message,
    ]
