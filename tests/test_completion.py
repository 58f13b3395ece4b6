"""Tests for the completion stack and its prompt_toolkit adapter."""

from __future__ import annotations

import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from byline.completion import Completion, CompletionStack, StackCompleter, no_completion
from byline.errors import EndOfInput


def fruit(left: str, right: str):
    words = ["apple", "apricot", "banana"]
    return "", [Completion(w) for w in words if w.startswith(left)]


def commands(left: str, right: str):
    head, _, word = left.rpartition(" ")
    kept = f"{head} " if head else ""
    return kept, [Completion("status", "status (show state)", is_finished=False)]


def test_new_stack_only_has_sentinel():
    stack = CompletionStack()

    assert stack.current is no_completion
    assert stack.active is None
    assert stack.depth == 0
    assert stack.current("abc", "") == ("abc", [])


def test_push_and_pop():
    stack = CompletionStack()
    stack.push(fruit)
    stack.push(commands)

    assert stack.current is commands
    stack.pop()
    assert stack.current is fruit
    assert stack.active is fruit


def test_pop_never_removes_sentinel():
    stack = CompletionStack()
    stack.pop()
    stack.pop()

    assert stack.current is no_completion
    assert stack.depth == 0


def test_override_restores_previous_function():
    stack = CompletionStack()
    stack.push(fruit)

    with stack.override(commands):
        assert stack.current is commands
        stack.push(no_completion)  # left behind on purpose

    assert stack.current is fruit
    assert stack.depth == 1


def test_override_restores_on_error():
    stack = CompletionStack()

    with pytest.raises(EndOfInput):
        with stack.override(fruit):
            raise EndOfInput()

    assert stack.active is None


def _complete(stack: CompletionStack, line: str, cursor: int | None = None):
    document = Document(line, cursor_position=len(line) if cursor is None else cursor)
    return list(StackCompleter(stack).get_completions(document, CompleteEvent(completion_requested=True)))


def test_completer_uses_top_of_stack():
    stack = CompletionStack()
    stack.push(fruit)

    completions = _complete(stack, "ap")

    assert [c.text for c in completions] == ["apple ", "apricot "]
    assert all(c.start_position == -2 for c in completions)


def test_completer_keeps_prefix_and_leaves_unfinished_open():
    stack = CompletionStack()
    stack.push(commands)

    completions = _complete(stack, "show sta")

    assert len(completions) == 1
    assert completions[0].text == "status"
    assert completions[0].start_position == -3
    assert completions[0].display_text == "status (show state)"


def test_completer_passes_text_around_cursor():
    seen = []

    def spy(left: str, right: str):
        seen.append((left, right))
        return left, []

    stack = CompletionStack()
    stack.push(spy)
    _complete(stack, "hello world", cursor=5)

    assert seen == [("hello", " world")]


def test_completer_with_only_sentinel_offers_nothing():
    assert _complete(CompletionStack(), "anything") == []
