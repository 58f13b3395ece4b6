"""Tab completion for byline prompts.

Applications supply plain completion functions; :class:`CompletionStack`
tracks which one is active and :class:`StackCompleter` adapts the active one
to prompt_toolkit's ``Completer`` interface.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from prompt_toolkit.completion import CompleteEvent, Completer
from prompt_toolkit.completion import Completion as ToolkitCompletion
from prompt_toolkit.document import Document

logger = logging.getLogger(__name__)

__all__ = [
    "Completion",
    "CompletionFunc",
    "CompletionStack",
    "StackCompleter",
    "no_completion",
]


@dataclass(frozen=True)
class Completion:
    """A single completion candidate.

    Attributes:
        replacement: Text inserted when the candidate is chosen
        display: Text shown in the completion menu (defaults to ``replacement``)
        is_finished: Whether the candidate completes the word; finished
            candidates are followed by a space
    """

    replacement: str
    display: str | None = None
    is_finished: bool = True

    @property
    def display_text(self) -> str:
        return self.replacement if self.display is None else self.display


# (text left of the cursor, text right of the cursor) -> (kept prefix, candidates)
CompletionFunc = Callable[[str, str], tuple[str, list[Completion]]]


def no_completion(left: str, right: str) -> tuple[str, list[Completion]]:
    """Completion function that never offers anything."""
    return left, []


class CompletionStack:
    """Stack of completion functions owned by one session.

    The bottom entry is :func:`no_completion` and can never be popped, so
    there is always a function to consult.
    """

    def __init__(self) -> None:
        self._stack: list[CompletionFunc] = [no_completion]

    @property
    def current(self) -> CompletionFunc:
        """The function consulted when the user asks for completion."""
        return self._stack[-1]

    @property
    def active(self) -> CompletionFunc | None:
        """The top function, or None when only the sentinel is installed."""
        if len(self._stack) == 1:
            return None
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of functions pushed above the sentinel."""
        return len(self._stack) - 1

    def push(self, func: CompletionFunc) -> None:
        self._stack.append(func)
        logger.debug("Pushed completion function (depth %d)", self.depth)

    def pop(self) -> None:
        """Drop the top function. Popping past the sentinel does nothing."""
        if len(self._stack) > 1:
            self._stack.pop()
            logger.debug("Popped completion function (depth %d)", self.depth)

    @contextmanager
    def override(self, func: CompletionFunc) -> Iterator[None]:
        """Make ``func`` active for the duration of the block.

        The whole stack is restored on exit, including when an exception
        propagates or the block left extra functions pushed.
        """
        saved = list(self._stack)
        self.push(func)
        try:
            yield
        finally:
            self._stack[:] = saved
            logger.debug("Restored completion stack (depth %d)", self.depth)


class StackCompleter(Completer):
    """prompt_toolkit completer that consults the top of a completion stack."""

    def __init__(self, stack: CompletionStack):
        self.stack = stack

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[ToolkitCompletion]:
        """Yield the candidates of the stack's current completion function."""
        left = document.text_before_cursor
        right = document.text_after_cursor
        kept, candidates = self.stack.current(left, right)

        if not left.startswith(kept):
            kept = ""
        start_position = -(len(left) - len(kept))

        for candidate in candidates:
            replacement = candidate.replacement
            if candidate.is_finished:
                replacement += " "
            yield ToolkitCompletion(
                replacement,
                start_position=start_position,
                display=candidate.display_text,
            )
