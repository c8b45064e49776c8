"""
Widget state for the searchable select.

A `SelectState` fully describes one widget instance. It is immutable: the
only way to move from one state to the next is `selectbox.update.transition`.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, NamedTuple, Optional, TypeVar

T = TypeVar("T")


class Item(NamedTuple, Generic[T]):
    """A catalog entry. `label` is displayed and searched, `payload` is opaque."""

    label: str
    payload: T


ItemLike = Item[T] | tuple[str, T]


@dataclass(frozen=True)
class SelectState(Generic[T]):
    """
    State of a single searchable select.

    `visible_items` is always `items` filtered by `search_value`; it is never
    set independently. `value` is not re-validated when the catalog changes,
    except through an explicit `ReplaceItems`.
    """

    items: tuple[Item[T], ...] = ()
    visible_items: tuple[Item[T], ...] = ()
    value: Optional[Item[T]] = None
    is_open: bool = False
    search_value: str = ""
    can_clear: bool = False

    @property
    def selected_label(self) -> str:
        return self.value.label if self.value is not None else ""


def to_item(item: ItemLike[T]) -> Item[T]:
    if isinstance(item, Item):
        return item
    label, payload = item
    return Item(label, payload)


def to_items(items: Iterable[ItemLike[T]]) -> tuple[Item[T], ...]:
    return tuple(to_item(item) for item in items)


def init(
    items: Iterable[ItemLike[T]], default: Optional[ItemLike[T]] = None
) -> SelectState[T]:
    """
    Build a closed, unfiltered, clearable widget over `items`.

    `default` is not checked against `items`. A default that is not part of
    the catalog is kept as the selection but never highlights a row.
    """
    catalog = to_items(items)
    return SelectState(
        items=catalog,
        visible_items=catalog,
        value=to_item(default) if default is not None else None,
        is_open=False,
        search_value="",
        can_clear=True,
    )


def empty() -> SelectState:
    """A widget with no catalog, no selection and no clear affordance."""
    return SelectState()


def get_value(state: SelectState[T]) -> Optional[T]:
    """Payload of the current selection, or None."""
    if state.value is None:
        return None
    return state.value.payload


current_selection = get_value


def replace_items(
    state: SelectState[T],
    items: Iterable[ItemLike[T]],
    selection: Optional[ItemLike[T]] = None,
) -> SelectState[T]:
    """Swap the catalog and selection, re-applying the current search text."""
    # Imported here: update depends on this module.
    from selectbox.intents import ReplaceItems
    from selectbox.update import transition

    return transition(ReplaceItems(items, selection), state)
