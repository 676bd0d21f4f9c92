"""Tests for progress and prompt collaborators."""

import io
from unittest.mock import AsyncMock, Mock

import pytest

from cli.prompt import TerminalConfirmationPrompt
from cli.utils import TerminalProgressBar
from fillcheck.reporting import NullConfirmationPrompt, NullProgressReporter, inside_multiplexer


def test_inside_multiplexer():
    assert inside_multiplexer({'TMUX': '/tmp/tmux'})
    assert inside_multiplexer({'STY': '42.pts-1.host'})
    assert inside_multiplexer({'TMUX': ''})
    assert not inside_multiplexer({})
    assert not inside_multiplexer({'TERM': 'screen'})


@pytest.mark.asyncio
async def test_null_collaborators_do_nothing():
    reporter = NullProgressReporter()
    reporter.start(3)
    reporter.update(1)
    reporter.finish()
    await NullConfirmationPrompt().confirm('anything')


def test_progress_bar_renders_counts():
    stream = io.StringIO()
    bar = TerminalProgressBar(stream=stream, width=10)

    bar.start(4)
    bar.update(2)
    bar.finish()

    output = stream.getvalue()
    assert '0/4' in output
    assert '█████░░░░░' in output
    assert '50%' in output
    assert output.endswith('2/4\n')


def test_progress_bar_defaults_to_stderr(capsys):
    bar = TerminalProgressBar(width=4)

    bar.start(2)
    bar.update(2)
    bar.finish()

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.endswith('2/2\n')


def test_progress_bar_finish_is_idempotent():
    stream = io.StringIO()
    bar = TerminalProgressBar(stream=stream)

    bar.start(1)
    bar.finish()
    bar.finish()
    bar.update(1)

    assert stream.getvalue().count('\n') == 1


def test_progress_bar_empty_phase():
    stream = io.StringIO()
    with TerminalProgressBar(stream=stream) as bar:
        bar.start(0)

    assert '0/0' in stream.getvalue()
    assert '100%' in stream.getvalue()


@pytest.mark.asyncio
async def test_terminal_prompt_uses_session():
    session = Mock()
    session.prompt_async = AsyncMock(return_value='')

    await TerminalConfirmationPrompt(session=session).confirm('warning')

    session.prompt_async.assert_awaited_once()
    session.prompt.assert_not_called()
