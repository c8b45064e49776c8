"""selectbox - a searchable select widget built as a pure state machine."""

from selectbox.config import ViewConfig
from selectbox.diff import VDOMOperation, diff_vdom
from selectbox.errors import (
    CallbackNotFoundError,
    CatalogError,
    SelectboxError,
    SessionNotMountedError,
)
from selectbox.html import render_html
from selectbox.intents import (
    Clear,
    ConfirmSearch,
    Intent,
    ReplaceItems,
    Search,
    Select,
    ToggleOpen,
)
from selectbox.session import WidgetSession
from selectbox.state import (
    Item,
    SelectState,
    current_selection,
    empty,
    get_value,
    init,
    replace_items,
)
from selectbox.update import filter_items, transition
from selectbox.vdom import VDOM, Callback, EventHandler, Node, VDOMNode
from selectbox.view import render

__all__ = [
    # State
    "Item",
    "SelectState",
    "init",
    "empty",
    "get_value",
    "current_selection",
    "replace_items",
    # Intents and transition
    "Intent",
    "ToggleOpen",
    "Select",
    "Clear",
    "Search",
    "ConfirmSearch",
    "ReplaceItems",
    "transition",
    "filter_items",
    # View
    "render",
    "render_html",
    "ViewConfig",
    "Node",
    "VDOM",
    "VDOMNode",
    "Callback",
    "EventHandler",
    "diff_vdom",
    "VDOMOperation",
    # Hosting
    "WidgetSession",
    # Errors
    "SelectboxError",
    "CallbackNotFoundError",
    "SessionNotMountedError",
    "CatalogError",
]
