"""
Intents raised by the presentation layer and consumed by `transition`.

The set is closed: `Intent` is the union of every class below.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, TypeVar, Union

from selectbox.state import Item, ItemLike, to_item, to_items

T = TypeVar("T")


@dataclass(frozen=True)
class ToggleOpen:
    """Expand the list if it is collapsed, collapse it otherwise."""


@dataclass(frozen=True)
class Select(Generic[T]):
    """Pick `item`, collapse the list and reset the search."""

    item: Item[T]

    def __post_init__(self):
        object.__setattr__(self, "item", to_item(self.item))


@dataclass(frozen=True)
class Clear:
    """Drop the current selection."""


@dataclass(frozen=True)
class Search:
    """Filter the catalog by `text`."""

    text: str


@dataclass(frozen=True)
class ConfirmSearch:
    """Accept the top filtered match (Enter in the search input)."""


@dataclass(frozen=True, init=False)
class ReplaceItems(Generic[T]):
    """Swap the catalog and selection, keeping the current search text."""

    items: tuple[Item[T], ...]
    selection: Optional[Item[T]]

    def __init__(
        self,
        items: Iterable[ItemLike[T]],
        selection: Optional[ItemLike[T]] = None,
    ):
        object.__setattr__(self, "items", to_items(items))
        object.__setattr__(
            self, "selection", to_item(selection) if selection is not None else None
        )


Intent = Union[
    ToggleOpen,
    Select[Any],
    Clear,
    Search,
    ConfirmSearch,
    ReplaceItems[Any],
]
