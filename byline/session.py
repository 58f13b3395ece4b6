"""Interactive session: the primary user-facing operations.

A :class:`Session` owns one output sink, one render mode and one completion
stack. Sessions are not thread-safe; give each thread its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from rich.console import Console

from .completion import CompletionFunc, CompletionStack
from .config import ERROR_COLOR, ERROR_TAG, WARNING_COLOR, WARNING_TAG, resolve_render_mode
from .errors import EndOfInput
from .reader import LineReader, ToolkitReader
from .render import RenderMode, render
from .stylized import fg, text, to_stylized

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["ReportType", "Rejected", "Session"]


class ReportType(Enum):
    """Kinds of messages understood by :meth:`Session.report`."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Rejected:
    """Returned by an ``ask_until`` confirm function to refuse an answer.

    The message is printed with ``say_ln`` before asking again.
    """

    message: Any


class Session:
    """One continuous interaction with the user."""

    def __init__(
        self,
        reader: LineReader | None = None,
        console: Console | None = None,
        mode: RenderMode | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            reader: Line reader used for input (defaults to prompt_toolkit)
            console: Rich console whose file receives output (defaults to stdout)
            mode: Render mode; detected from the console when omitted
        """
        self.console = console or Console(highlight=False)
        self.reader = reader or ToolkitReader()
        self.mode = resolve_render_mode(self.console, mode)
        self.completion = CompletionStack()
        self.reader.attach_completion(self.completion)

    def render(self, value: Any) -> str:
        """Render ``value`` with this session's mode."""
        return render(self.mode, value)

    def run(self, action: Callable[[Session], T]) -> T | None:
        """Run ``action`` with this session, returning None on end of input."""
        try:
            return action(self)
        except EndOfInput:
            logger.debug("Session ended by end of input")
            return None

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def say(self, message: Any) -> None:
        """Write stylized text without a trailing newline."""
        out = self.console.file
        out.write(self.render(message))
        out.flush()

    def say_ln(self, message: Any) -> None:
        """Like :meth:`say`, but append a newline."""
        self.say(to_stylized(message) + text("\n"))

    def report(self, kind: ReportType, message: Any) -> None:
        """Write ``message`` prefixed with a colored ``error:``/``warning:`` tag."""
        if kind is ReportType.ERROR:
            tag = text(ERROR_TAG) + fg(ERROR_COLOR)
        else:
            tag = text(WARNING_TAG) + fg(WARNING_COLOR)
        self.say(tag + to_stylized(message))

    def report_ln(self, kind: ReportType, message: Any) -> None:
        """Like :meth:`report`, but append a newline."""
        self.report(kind, to_stylized(message) + text("\n"))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def ask(self, prompt: Any, default: str | None = None) -> str:
        """Read a line of input after printing ``prompt``.

        Args:
            prompt: The prompt to display
            default: Answer returned when the user enters nothing; shown as
                ``[default]`` after the prompt

        Returns:
            The user's input verbatim, or ``default`` for empty input

        Raises:
            EndOfInput: If the user signals end of input
        """
        full_prompt = to_stylized(prompt)
        if default is not None:
            full_prompt = full_prompt + text("[") + text(default) + text("] ")

        answer = self.reader.read_line(self.render(full_prompt))
        if answer is None:
            raise EndOfInput("end of input while reading a line")
        if not answer and default is not None:
            return default
        return answer

    def ask_char(self, prompt: Any) -> str:
        """Read a single character of input.

        Raises:
            EndOfInput: If the user signals end of input
        """
        answer = self.reader.read_char(self.render(prompt))
        if answer is None:
            raise EndOfInput("end of input while reading a character")
        return answer

    def ask_password(self, prompt: Any, mask: str | None = None) -> str:
        """Read a password without echoing it.

        Args:
            prompt: The prompt to display
            mask: Character echoed for each key press; nothing is echoed
                when omitted

        Raises:
            EndOfInput: If the user signals end of input
            ValueError: If ``mask`` is not a single character
        """
        if mask is not None and len(mask) != 1:
            raise ValueError("mask must be a single character")

        answer = self.reader.read_password(self.render(prompt), mask)
        if answer is None:
            raise EndOfInput("end of input while reading a password")
        return answer

    def ask_until(
        self,
        prompt: Any,
        default: str | None,
        confirm: Callable[[str], Any],
    ) -> Any:
        """Keep asking until ``confirm`` accepts the answer.

        ``confirm`` receives each answer from :meth:`ask` and returns either
        the accepted value (possibly transformed) or :class:`Rejected` with a
        message, which is printed before prompting again.

        Raises:
            EndOfInput: If the user signals end of input
        """
        while True:
            answer = self.ask(prompt, default)
            result = confirm(answer)
            if isinstance(result, Rejected):
                self.say_ln(result.message)
                continue
            return result

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def push_completion_function(self, func: CompletionFunc) -> None:
        """Make ``func`` the active completion function."""
        self.completion.push(func)

    def pop_completion_function(self) -> None:
        """Restore the previously active completion function."""
        self.completion.pop()

    @contextmanager
    def completion_func(self, func: CompletionFunc) -> Iterator[None]:
        """Use ``func`` for completion inside the ``with`` block."""
        with self.completion.override(func):
            yield

    def with_completion_func(self, func: CompletionFunc, action: Callable[[], T]) -> T:
        """Run ``action`` with ``func`` as the active completion function."""
        with self.completion.override(func):
            return action()
