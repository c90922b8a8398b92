"""Numbered-option picker for interactive selection of PRs and worktrees.

Everything is written to stderr so `$(gh-worktree pr switch --shell)`
captures only the selected path.
"""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

CANCEL_INPUTS = ("", "q")


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: _prompt_stderr)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _prompt_stderr(prompt_text):
    print(prompt_text, end="", file=sys.stderr, flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _display_options(prompt, options, output):
    print("", file=output)
    print(prompt, file=output)
    for i, option in enumerate(options):
        print(f"  {i + 1}) {option}", file=output)
    print("", file=output)


def _parse_choice(raw_input, option_count):
    raw_input = raw_input.strip()
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def select_option(prompt, options, *, config=None):
    """Display numbered options and return the 0-based index of the selection.

    Args:
        prompt: Header text displayed above the options.
        options: List of option label strings.
        config: MenuConfig with input_fn and output stream (defaults apply).

    Returns:
        The selected index, or None when the user cancels (empty input, `q`
        or closed input).
    """
    if config is None:
        config = MenuConfig()

    _display_options(prompt, options, config.output)
    prompt_text = f"Enter your choice (1-{len(options)}, empty to cancel): "

    while True:
        try:
            raw_input = config.input_fn(prompt_text)
        except EOFError:
            print("", file=config.output)
            return None
        if raw_input.strip().lower() in CANCEL_INPUTS:
            return None
        parsed = _parse_choice(raw_input, len(options))
        if parsed is not None:
            return parsed - 1
        print(
            f"Invalid choice. Please enter a number between 1 and {len(options)}.",
            file=config.output,
        )
