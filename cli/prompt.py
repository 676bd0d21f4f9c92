"""Interactive confirmation prompt built on prompt_toolkit."""

from prompt_toolkit import PromptSession

from cli.constants import CONTINUE_PROMPT_TEXT, STYLE


class TerminalConfirmationPrompt:
    """Waits, without blocking the event loop, until the user presses enter."""

    def __init__(self, session: PromptSession = None):
        self._session = session

    async def confirm(self, message: str) -> None:
        """
        Show the continue prompt and wait for enter.

        Args:
            message: Warning already reported to the user

        Raises:
            KeyboardInterrupt: If the user aborts with Ctrl-C
            EOFError: If stdin is closed
        """
        if self._session is None:
            self._session = PromptSession(style=STYLE)
        await self._session.prompt_async([("class:prompt", CONTINUE_PROMPT_TEXT)])
