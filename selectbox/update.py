"""
The transition function of the searchable select.

`transition(intent, state)` is pure and total: every intent is valid in every
state and the previous state is never modified.
"""

from dataclasses import replace
from typing import Iterable, TypeVar, assert_never

from selectbox.intents import (
    Clear,
    ConfirmSearch,
    Intent,
    ReplaceItems,
    Search,
    Select,
    ToggleOpen,
)
from selectbox.state import Item, SelectState

T = TypeVar("T")


def label_matches(label: str, text: str) -> bool:
    """Case-insensitive substring test (plain lowercase fold, no collation)."""
    return text.lower() in label.lower()


def filter_items(items: Iterable[Item[T]], text: str) -> tuple[Item[T], ...]:
    """Items whose label contains `text`, in catalog order."""
    items = tuple(items)
    if text == "":
        return items
    return tuple(item for item in items if label_matches(item.label, text))


def _reset_search(state: SelectState[T]) -> SelectState[T]:
    return replace(state, is_open=False, search_value="", visible_items=state.items)


def _search(state: SelectState[T], text: str) -> SelectState[T]:
    return replace(
        state, search_value=text, visible_items=filter_items(state.items, text)
    )


def transition(intent: Intent, state: SelectState[T]) -> SelectState[T]:
    if isinstance(intent, ToggleOpen):
        return replace(state, is_open=not state.is_open)

    elif isinstance(intent, Select):
        return replace(_reset_search(state), value=intent.item)

    elif isinstance(intent, Clear):
        return replace(state, value=None)

    elif isinstance(intent, Search):
        return _search(state, intent.text)

    elif isinstance(intent, ConfirmSearch):
        # Top of the filtered list, not of the whole catalog
        value = state.visible_items[0] if state.visible_items else state.value
        return replace(_reset_search(state), value=value)

    elif isinstance(intent, ReplaceItems):
        swapped = replace(state, items=intent.items, value=intent.selection)
        return _search(swapped, state.search_value)

    else:
        assert_never(intent)
