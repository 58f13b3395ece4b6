"""Numbered menus that accept either a prefix or the start of an item.

Build a :class:`Menu`, adjust it with the ``with_*`` methods (each returns a
new menu), then hand it to :func:`ask_with_menu` or
:func:`ask_with_menu_repeatedly`::

    colors = Menu(["red", "green", "blue"]).with_banner("Pick a color:")
    choice = ask_with_menu_repeatedly(session, colors, "> ", "Please pick one.")
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar, Union

from .completion import Completion, CompletionFunc
from .config import DEFAULT_INDENT, DEFAULT_ITEM_SUFFIX
from .render import RenderMode, render
from .session import Session
from .stylized import Stylized, text, to_stylized

T = TypeVar("T")

__all__ = [
    "Choice",
    "Match",
    "Matcher",
    "Menu",
    "Other",
    "ask_with_menu",
    "ask_with_menu_repeatedly",
    "default_matcher",
    "match_on_prefix",
    "menu_completion",
    "numbered",
]


@dataclass(frozen=True)
class Match(Generic[T]):
    """The user picked a menu item."""

    item: T


@dataclass(frozen=True)
class Other:
    """The user entered text that does not select an item."""

    text: str


Choice = Union[Match[T], Other]

# (menu, rendered prefix -> item, raw input) -> choice
Matcher = Callable[["Menu[T]", dict[str, T], str], Choice]


def numbered(index: int) -> Stylized:
    """Default prefix: the 1-based index right-aligned to two digits."""
    return text(f"{index:2d}")


def match_on_prefix(menu: Menu[T], answer: str) -> list[T]:
    """Items whose displayed text starts with ``answer``."""
    return [item for item in menu.items if menu.display_text(item).startswith(answer)]


def default_matcher(menu: Menu[T], prefixes: dict[str, T], answer: str) -> Choice:
    """Resolve input against a menu.

    A unique prefix of an item's displayed text wins. Otherwise the input is
    looked up verbatim among the printed item prefixes (``"1"``, ``"2"``, ...).
    Anything else is returned as :class:`Other`.
    """
    matches = match_on_prefix(menu, answer)
    if len(matches) == 1:
        return Match(matches[0])

    if answer in prefixes:
        return Match(prefixes[answer])

    return Other(answer)


def menu_completion(menu: Menu[T]) -> CompletionFunc:
    """Completion function offering the menu's items."""

    def complete(left: str, right: str) -> tuple[str, list[Completion]]:
        items = menu.items if not left else match_on_prefix(menu, left)
        candidates = []
        for item in items:
            shown = menu.display_text(item)
            candidates.append(Completion(shown, shown, is_finished=False))
        return "", candidates

    return complete


def _display_default(item: Any) -> Stylized:
    return to_stylized(str(item))


@dataclass(frozen=True)
class Menu(Generic[T]):
    """A list of items to choose from and how to present them.

    Attributes:
        items: The menu items, in display order
        display: Turns an item into stylized text
        banner: Printed above the items
        item_prefix: Generates the selector shown before item ``n`` (1-based)
        item_suffix: Printed between the selector and the item
        before_prompt: Printed between the items and the prompt
        matcher: Turns the user's input into a :data:`Choice`
    """

    items: Sequence[T]
    display: Callable[[T], Any] = _display_default
    banner: Any = None
    item_prefix: Callable[[int], Any] = numbered
    item_suffix: Any = field(default_factory=lambda: text(DEFAULT_ITEM_SUFFIX))
    before_prompt: Any = None
    matcher: Matcher = default_matcher

    def display_text(self, item: T) -> str:
        """The item's displayed text without attributes."""
        return render(RenderMode.PLAIN, self.display(item))

    def with_banner(self, banner: Any) -> Menu[T]:
        return replace(self, banner=banner)

    def with_prefix(self, item_prefix: Callable[[int], Any]) -> Menu[T]:
        """Use ``item_prefix`` to generate the selector for each item.

        Selectors should be unique; the default numbers items from 1.
        """
        return replace(self, item_prefix=item_prefix)

    def with_suffix(self, item_suffix: Any) -> Menu[T]:
        return replace(self, item_suffix=item_suffix)

    def with_before_prompt(self, before_prompt: Any) -> Menu[T]:
        return replace(self, before_prompt=before_prompt)

    def with_matcher(self, matcher: Matcher) -> Menu[T]:
        return replace(self, matcher=matcher)


def _display_menu(session: Session, menu: Menu[T]) -> dict[str, T]:
    """Print the menu and return the printed selectors mapped to their items."""
    if menu.banner is not None:
        session.say_ln(to_stylized(menu.banner) + text("\n"))

    prefixes: dict[str, T] = {}
    for index, item in enumerate(menu.items, start=1):
        bullet = to_stylized(menu.item_prefix(index))
        session.say_ln(
            text(DEFAULT_INDENT)
            + bullet
            + to_stylized(menu.item_suffix)
            + to_stylized(menu.display(item))
        )
        prefixes[render(RenderMode.PLAIN, bullet).strip()] = item

    if menu.before_prompt is None:
        session.say_ln(Stylized())
    else:
        session.say_ln(text("\n") + to_stylized(menu.before_prompt))

    return prefixes


def ask_with_menu(session: Session, menu: Menu[T], prompt: Any) -> Choice:
    """Show ``menu`` once and interpret the user's answer.

    Unless the application already installed a completion function, the
    menu items are offered for tab completion while the prompt is open.

    Returns:
        :class:`Match` for a selected item, :class:`Other` for anything else

    Raises:
        EndOfInput: If the user signals end of input
    """
    completion = session.completion.active or menu_completion(menu)

    with session.completion_func(completion):
        prefixes = _display_menu(session, menu)
        answer = session.ask(prompt, None)
        return menu.matcher(menu, prefixes, answer)


def ask_with_menu_repeatedly(
    session: Session,
    menu: Menu[T],
    prompt: Any,
    error_message: Any,
) -> Match[T]:
    """Like :func:`ask_with_menu`, but only accept a menu item.

    The menu is shown again, with ``error_message`` above the prompt, until
    the user selects an item.

    Raises:
        EndOfInput: If the user signals end of input
    """
    current = menu
    while True:
        choice = ask_with_menu(session, current, prompt)
        if isinstance(choice, Match):
            return choice
        current = replace(menu, before_prompt=error_message)
