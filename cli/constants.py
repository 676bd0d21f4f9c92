"""CLI constants: help texts, prompt text and styling."""

from prompt_toolkit.styles import Style

STYLE = Style.from_dict(
    {
        "prompt": "#F45935 bold",
    }
)

GREEN = "\033[32m"
RESET = "\033[0m"

CONTINUE_PROMPT_TEXT = "(press enter to continue)"

PROGRESS_BAR_WIDTH = 40

COMMAND_HELP = """Fill PATH with random chunk files until the requested count is
reached or the device runs out of space, then read every written chunk
back and verify its SHA-256 checksum."""

CHUNK_COUNT_HELP = "Number of chunks to write"
CHUNK_SIZE_HELP = "Size of each chunk (e.g. 256M, 1.5G, 4096)"
QUIET_HELP = "Do not log except for errors"
VERBOSE_HELP = "Verbose log output"
PROGRESS_BAR_HELP = "Output a terminal progress bar"
SUPPRESS_TMUX_WARNING_HELP = "Suppress warning of not inside a TMUX session"
