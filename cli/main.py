"""CLI entry point."""

import sys

import click
from pydantic import ValidationError

from cli.config import ProbeConfig, default_chunk_size
from cli.constants import (
    CHUNK_COUNT_HELP,
    CHUNK_SIZE_HELP,
    COMMAND_HELP,
    PROGRESS_BAR_HELP,
    QUIET_HELP,
    SUPPRESS_TMUX_WARNING_HELP,
    VERBOSE_HELP,
)
from cli.prompt import TerminalConfirmationPrompt
from cli.utils import TerminalProgressBar
from common.constants import DEFAULT_CHUNK_COUNT, DEFAULT_TARGET_DIRECTORY, VERSION
from common.exceptions import ProbeError
from common.logging_config import setup_logging
from fillcheck.reporting import NullProgressReporter
from fillcheck.runner import probe


@click.command(help=COMMAND_HELP, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-n", "--chunk-count", type=int, default=DEFAULT_CHUNK_COUNT, show_default=True, help=CHUNK_COUNT_HELP)
@click.option("-s", "--chunk-size", type=str, default=default_chunk_size, show_default="256M", help=CHUNK_SIZE_HELP)
@click.option("-q", "--quiet", is_flag=True, default=False, help=QUIET_HELP)
@click.option("-v", "--verbose", is_flag=True, default=False, help=VERBOSE_HELP)
@click.option("--progress-bar/--no-progress-bar", default=True, show_default=True, help=PROGRESS_BAR_HELP)
@click.option("--suppress-tmux-warning", is_flag=True, default=False, help=SUPPRESS_TMUX_WARNING_HELP)
@click.argument("path", required=False, default=DEFAULT_TARGET_DIRECTORY)
@click.version_option(VERSION)
def main(
    chunk_count: int,
    chunk_size: str,
    quiet: bool,
    verbose: bool,
    progress_bar: bool,
    suppress_tmux_warning: bool,
    path: str,
) -> None:
    try:
        config = ProbeConfig(
            target_directory=path,
            chunk_count=chunk_count,
            chunk_size=chunk_size,
            quiet=quiet,
            verbose=verbose,
            progress_bar=progress_bar,
            suppress_tmux_warning=suppress_tmux_warning,
        )
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise click.UsageError(messages)

    logger = setup_logging('fillcheck', config.verbosity)
    reporter = TerminalProgressBar() if config.progress_bar else NullProgressReporter()

    try:
        probe(config, reporter=reporter, prompt=TerminalConfirmationPrompt())
    except ProbeError as e:
        click.echo(f"An error occurred: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
