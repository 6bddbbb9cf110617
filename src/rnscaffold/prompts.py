"""Terminal prompts for scaffold questions.

A question is either a pick-one list (answered by number or by label) or
free text checked by a validator. Both keep asking until the answer is
acceptable.
"""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TextIO

from rnscaffold.errors import ValidationError


@dataclass
class PromptIO:
    """Where prompts read answers from and write to."""

    read: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def match_choice(raw: str, choices: Sequence[str]) -> Optional[str]:
    """Return the label *raw* names, by 1-based number or case-insensitive label."""
    raw = raw.strip()
    if raw.isdigit() and 1 <= int(raw) <= len(choices):
        return choices[int(raw) - 1]
    for label in choices:
        if label.lower() == raw.lower():
            return label
    return None


def _read(prompt_text, io):
    try:
        return io.read(prompt_text)
    except EOFError:
        print("", file=io.output)
        print("Input closed. Exiting.", file=io.output)
        sys.exit(0)


def _show_choices(message, choices, default, io):
    print(f"? {message}", file=io.output)
    for number, label in enumerate(choices, start=1):
        pointer = ">" if label == default else " "
        print(f" {pointer} {number}) {label}", file=io.output)


def ask_choice(message, choices: Sequence[str], *, io=None) -> str:
    """Ask the user to pick one of *choices* and return the chosen label.

    An empty answer picks the first choice.
    """
    io = io or PromptIO()
    default = choices[0]
    _show_choices(message, choices, default, io)

    while True:
        raw = _read(f"  Answer [{default}]: ", io)
        if not raw.strip():
            return default
        label = match_choice(raw, choices)
        if label is not None:
            return label
        print(f">> Please answer with 1-{len(choices)} or one of: {', '.join(choices)}",
              file=io.output)


def ask_text(message, validate: Optional[Callable[[str], str]] = None, *, io=None) -> str:
    """Ask for a line of text until *validate* accepts it."""
    io = io or PromptIO()

    while True:
        value = _read(f"? {message} ", io).strip()
        if validate is None:
            return value
        try:
            return validate(value)
        except ValidationError as exc:
            print(f">> {exc}", file=io.output)


def ask(message, choices: Sequence[str] = (), validate=None, *, io=None) -> str:
    """Ask a choice question when *choices* is given, otherwise a text question."""
    if choices:
        return ask_choice(message, choices, io=io)
    return ask_text(message, validate, io=io)
