"""Shared fixtures for byline tests."""

from __future__ import annotations

import io
from collections import deque

import pytest
from rich.console import Console

from byline import RenderMode, Session
from byline.completion import CompletionStack


class ScriptedReader:
    """LineReader that replays canned answers and records what it was shown.

    Running out of answers behaves like the user pressing Ctrl+D.
    """

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = deque(answers or [])
        self.prompts: list[str] = []
        self.echoed: list[str] = []
        self.stack: CompletionStack | None = None
        self.completions_seen: list = []
        self.on_read = None

    def attach_completion(self, stack: CompletionStack) -> None:
        self.stack = stack

    def _next(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self.on_read is not None:
            self.on_read(self)
        if not self.answers:
            return None
        return self.answers.popleft()

    def read_line(self, prompt: str) -> str | None:
        return self._next(prompt)

    def read_char(self, prompt: str) -> str | None:
        answer = self._next(prompt)
        return None if answer is None else answer[:1]

    def read_password(self, prompt: str, mask: str | None) -> str | None:
        answer = self._next(prompt)
        if answer is not None:
            self.echoed.append((mask or "") * len(answer))
        return answer

    def complete(self, left: str, right: str = ""):
        """Simulate the user pressing Tab."""
        assert self.stack is not None
        return self.stack.current(left, right)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reader() -> ScriptedReader:
    return ScriptedReader()


@pytest.fixture
def session(reader: ScriptedReader, output: io.StringIO) -> Session:
    return Session(reader=reader, console=Console(file=output), mode=RenderMode.PLAIN)


@pytest.fixture
def ansi_session(reader: ScriptedReader, output: io.StringIO) -> Session:
    return Session(reader=reader, console=Console(file=output), mode=RenderMode.ANSI)
