"""
Declarative view of the searchable select.

`render(state)` is pure: it reads the state and returns a `Node` tree whose
event handlers map DOM events to intents. Nothing here mutates the state; a
host (see `selectbox.session`) dispatches whatever intent a handler returns.
"""

from typing import Literal, Optional

from selectbox import html as h
from selectbox.config import DEFAULT_CONFIG, ViewConfig
from selectbox.events import FormEvent, KeyboardEvent, is_enter, target_value
from selectbox.intents import Clear, ConfirmSearch, Search, Select, ToggleOpen
from selectbox.state import Item, SelectState
from selectbox.vdom import EventHandler, Node


def show_clear(state: SelectState) -> bool:
    """The clear affordance needs clearing allowed and a non-empty selected label."""
    return state.can_clear and state.selected_label != ""


def show_no_match(state: SelectState) -> bool:
    """Distinguishes "nothing matched the search" from "empty catalog"."""
    return not state.visible_items and state.search_value != ""


def is_selected(state: SelectState, item: Item) -> bool:
    # Labels only: same label with a different payload is still highlighted
    return state.value is not None and item.label == state.value.label


def arrow_direction(state: SelectState) -> Literal["up", "down"]:
    return "up" if state.is_open else "down"


def classnames(*names: Optional[str]) -> str:
    return " ".join(name for name in names if name)


def _suppressed(fn) -> EventHandler:
    return EventHandler(fn, prevent_default=True, stop_propagation=True)


def _on_toggle():
    return ToggleOpen()


def _on_clear():
    return Clear()


def _on_input(event: FormEvent):
    return Search(target_value(event))


def _on_key_down(event: KeyboardEvent):
    if is_enter(event):
        return ConfirmSearch()
    return None


def _on_select(item: Item):
    def on_click():
        return Select(item)

    return on_click


def render_item(state: SelectState, item: Item, config: ViewConfig) -> Node:
    selected = is_selected(state, item)
    return h.li(
        className=classnames(
            config.item_class, config.item_selected_class if selected else None
        ),
        onClick=_on_select(item),
    )[item.label]


def render(state: SelectState, config: Optional[ViewConfig] = None) -> Node:
    config = config or DEFAULT_CONFIG
    arrow_glyph = (
        config.arrow_up_glyph
        if arrow_direction(state) == "up"
        else config.arrow_down_glyph
    )

    clear = None
    if show_clear(state):
        clear = h.a(className=config.clear_class, onClick=_suppressed(_on_clear))[
            h.i(className=config.icon_class)[config.clear_glyph]
        ]

    no_match = None
    if show_no_match(state):
        no_match = h.p(className=config.no_match_class)[config.no_match_text]

    return h.div(
        className=classnames(
            config.root_class, config.open_class if state.is_open else None
        )
    )[
        h.div(className=config.selected_class, onClick=_suppressed(_on_toggle))[
            h.span(className=config.selected_text_class)[state.selected_label],
            clear,
            h.i(className=classnames(config.icon_class, config.arrow_class))[
                arrow_glyph
            ],
        ],
        h.div(className=config.dropdown_class)[
            h.input(
                value=state.search_value,
                placeholder=config.placeholder,
                onInput=_on_input,
                onKeyDown=_on_key_down,
            ),
            h.ul(className=config.list_class)[
                [render_item(state, item, config) for item in state.visible_items]
            ],
            no_match,
        ],
    ]
