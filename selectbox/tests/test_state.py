"""
Tests for widget construction and the catalog-swap helper.
"""

from dataclasses import FrozenInstanceError

import pytest

from selectbox.intents import Search
from selectbox.state import (
    Item,
    current_selection,
    empty,
    get_value,
    init,
    replace_items,
)
from selectbox.update import transition


class TestConstructors:
    """Test `init` and `empty`."""

    def test_init(self, fruits):
        """init shows the whole catalog, closed, with clearing allowed."""
        state = init(fruits, fruits[1])
        assert state.items == tuple(fruits)
        assert state.visible_items == tuple(fruits)
        assert state.value == Item("Banana", 2)
        assert state.is_open is False
        assert state.search_value == ""
        assert state.can_clear is True

    def test_init_without_default(self, fruits):
        state = init(fruits)
        assert state.value is None
        assert state.can_clear is True

    def test_init_coerces_pairs(self):
        """Plain 2-tuples are accepted and become Items."""
        state = init([("One", 1), ("Two", 2)], ("Two", 2))
        assert all(isinstance(item, Item) for item in state.items)
        assert isinstance(state.value, Item)
        assert state.items[0].label == "One"
        assert state.value.payload == 2

    def test_init_does_not_validate_default(self, fruits):
        """A default outside the catalog is kept as-is."""
        state = init(fruits, ("Cherry", 99))
        assert state.value == ("Cherry", 99)
        assert get_value(state) == 99

    def test_empty(self):
        state = empty()
        assert state.items == ()
        assert state.visible_items == ()
        assert state.value is None
        assert state.is_open is False
        assert state.search_value == ""
        assert state.can_clear is False

    def test_state_is_immutable(self, fruit_state):
        with pytest.raises(FrozenInstanceError):
            fruit_state.is_open = True  # type: ignore[misc]


class TestGetValue:
    """Test projecting the selection to its payload."""

    def test_no_selection(self, fruit_state):
        assert get_value(fruit_state) is None
        assert current_selection(fruit_state) is None

    def test_payload_only(self, fruits):
        state = init(fruits, fruits[2])
        assert get_value(state) == 3

    def test_payload_is_not_inspected(self):
        payload = object()
        state = init([("Thing", payload)], ("Thing", payload))
        assert get_value(state) is payload

    def test_selected_label(self, fruits):
        assert init(fruits).selected_label == ""
        assert init(fruits, fruits[0]).selected_label == "Apple"


class TestReplaceItems:
    """Test swapping the catalog mid-session."""

    def test_replaces_items_and_selection(self, fruit_state):
        new_items = [Item("Cherry", 4), Item("Date", 5)]
        state = replace_items(fruit_state, new_items, new_items[1])
        assert state.items == tuple(new_items)
        assert state.visible_items == tuple(new_items)
        assert state.value == Item("Date", 5)

    def test_clears_selection_when_none_given(self, fruits):
        state = replace_items(init(fruits, fruits[0]), [Item("Cherry", 4)], None)
        assert state.value is None

    def test_reapplies_stale_search(self, fruit_state):
        """The current search text filters the new catalog."""
        searching = transition(Search("an"), fruit_state)
        new_items = [Item("Mango", 1), Item("Kiwi", 2), Item("Orange", 3)]
        state = replace_items(searching, new_items, None)
        assert state.search_value == "an"
        assert state.visible_items == (Item("Mango", 1), Item("Orange", 3))

    def test_matches_fresh_state_then_search(self, fruit_state):
        """Same visible items as a fresh widget over the new catalog plus Search(q)."""
        searching = transition(Search("A"), fruit_state)
        new_items = [Item("Papaya", 1), Item("Fig", 2), Item("Grape", 3)]
        replaced = replace_items(searching, new_items, None)
        fresh = transition(Search("A"), init(new_items))
        assert replaced.visible_items == fresh.visible_items

    def test_keeps_open_flag_and_can_clear(self, fruit_state):
        opened = fruit_state.__class__(
            items=fruit_state.items,
            visible_items=fruit_state.visible_items,
            is_open=True,
            can_clear=True,
        )
        state = replace_items(opened, [Item("Cherry", 4)])
        assert state.is_open is True
        assert state.can_clear is True

    def test_on_empty_widget(self):
        state = replace_items(empty(), [("Cherry", 4)], ("Cherry", 4))
        assert state.items == (Item("Cherry", 4),)
        assert state.value == Item("Cherry", 4)
        assert state.can_clear is False
