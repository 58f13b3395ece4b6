"""Line readers: where byline gets its input from.

A session talks to the terminal only through the :class:`LineReader`
protocol. :class:`ToolkitReader` implements it on top of prompt_toolkit.
Every read returns None on end of input so the session can decide what that
means.
"""

from __future__ import annotations

import logging
from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import DummyHistory, InMemoryHistory
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.processors import PasswordProcessor
from prompt_toolkit.output import Output

from .completion import CompletionStack, StackCompleter

logger = logging.getLogger(__name__)

__all__ = ["LineReader", "ToolkitReader", "mask_processor"]


class LineReader(Protocol):
    """Capability a session needs from the line-editing engine.

    Prompts arrive already rendered (possibly containing ANSI escapes).
    """

    def read_line(self, prompt: str) -> str | None:
        """Read one line of input, or None at end of input."""
        ...

    def read_char(self, prompt: str) -> str | None:
        """Read a single key press, or None at end of input."""
        ...

    def read_password(self, prompt: str, mask: str | None) -> str | None:
        """Read a line without echoing it, or None at end of input."""
        ...

    def attach_completion(self, stack: CompletionStack) -> None:
        """Consult ``stack`` whenever the user requests completion."""
        ...


def mask_processor(mask: str | None) -> PasswordProcessor:
    """Processor that echoes ``mask`` for every typed character.

    With no mask nothing is echoed at all.
    """
    return PasswordProcessor(char=mask or "")


class ToolkitReader:
    """LineReader backed by prompt_toolkit.

    Lines share one ``PromptSession`` so history is available for the life of
    the reader (it is never written to disk). Passwords use a throwaway
    session without history.
    """

    def __init__(self, *, input: Input | None = None, output: Output | None = None) -> None:
        """Initialize the reader.

        Args:
            input: Optional prompt_toolkit input (defaults to the terminal)
            output: Optional prompt_toolkit output (defaults to the terminal)
        """
        self._input = input
        self._output = output
        self._stack: CompletionStack | None = None
        self._line_session: PromptSession[str] | None = None

    def attach_completion(self, stack: CompletionStack) -> None:
        """Offer completions from ``stack`` on every line read."""
        self._stack = stack

    # ------------------------------------------------------------------
    # LineReader API
    # ------------------------------------------------------------------
    def read_line(self, prompt: str) -> str | None:
        completer = StackCompleter(self._stack) if self._stack is not None else None
        try:
            return self._get_line_session().prompt(ANSI(prompt), completer=completer)
        except (KeyboardInterrupt, EOFError):
            logger.debug("End of input while reading a line")
            return None

    def read_char(self, prompt: str) -> str | None:
        typed: list[str] = []
        kb = KeyBindings()

        @kb.add("<any>")
        def _(event):
            # Arrows, function keys and other non-printing keys are ignored.
            if len(event.data) != 1 or not event.data.isprintable():
                return
            typed.append(event.data)
            event.app.exit(result=event.data)

        @kb.add("enter")
        def _(event):
            event.app.exit(result="\n")

        @kb.add("c-d")
        def _(event):
            event.app.exit(result=None)

        @kb.add("c-c")
        def _(event):
            event.app.exit(result=None)

        control = FormattedTextControl(lambda: ANSI(prompt + "".join(typed)))
        app: Application[str | None] = Application(
            layout=Layout(Window(content=control, dont_extend_height=True)),
            key_bindings=kb,
            full_screen=False,
            input=self._input,
            output=self._output,
        )

        try:
            result = app.run()
        except (KeyboardInterrupt, EOFError):
            result = None

        if result is None:
            logger.debug("End of input while reading a character")
        return result

    def read_password(self, prompt: str, mask: str | None) -> str | None:
        session: PromptSession[str] = PromptSession(
            history=DummyHistory(),
            input=self._input,
            output=self._output,
        )
        try:
            return session.prompt(ANSI(prompt), input_processors=[mask_processor(mask)])
        except (KeyboardInterrupt, EOFError):
            logger.debug("End of input while reading a password")
            return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get_line_session(self) -> PromptSession[str]:
        if self._line_session is None:
            self._line_session = PromptSession(
                history=InMemoryHistory(),
                complete_while_typing=False,
                input=self._input,
                output=self._output,
            )
        return self._line_session
