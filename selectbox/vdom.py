"""
UI tree nodes and their JSON-able VDOM form.

A `Node` is what `selectbox.view.render` builds. `Node.render()` turns it into
a `VDOMNode` tree that a host can ship to a client, plus the table of
server-side callbacks referenced from that tree.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable as _Iterable
from typing import (
    Any,
    Callable,
    NamedTuple,
    NotRequired,
    Optional,
    Sequence,
    TypedDict,
    Union,
    cast,
)


# ============================================================================
# Core VDOM
# ============================================================================

PrimitiveNode = Union[str, int, float, None]
NodeTree = Union["Node", PrimitiveNode]
# A child can be a NodeTree or any iterable yielding children (e.g., generators)
Child = Union[NodeTree, _Iterable[NodeTree]]
Children = Sequence[Child]

CALLBACK_PREFIX = "$$fn:"


class EventOptions(TypedDict):
    preventDefault: bool
    stopPropagation: bool


class VDOMNode(TypedDict):
    tag: str
    key: NotRequired[str]
    props: NotRequired[dict[str, Any]]  # callbacks replaced by placeholders
    children: "NotRequired[Sequence[VDOMNode | PrimitiveNode] | None]"
    # Only present for handlers that suppress default action or propagation
    eventOptions: NotRequired[dict[str, EventOptions]]


class Callback(NamedTuple):
    fn: Callable
    n_args: int
    prevent_default: bool = False
    stop_propagation: bool = False


Callbacks = dict[str, Callback]
VDOM = Union[VDOMNode, PrimitiveNode]
Props = dict[str, Any]


class EventHandler:
    """
    A callable prop with DOM event options.

    The host must call `preventDefault()` / `stopPropagation()` on the native
    event before forwarding it when the matching flag is set.
    """

    def __init__(
        self,
        fn: Callable,
        prevent_default: bool = False,
        stop_propagation: bool = False,
    ):
        self.fn = fn
        self.prevent_default = prevent_default
        self.stop_propagation = stop_propagation

    def __call__(self, *args):
        return self.fn(*args)


class Node:
    """A UI tree node: a tag, its props and its children."""

    def __init__(
        self,
        tag: str,
        props: Optional[dict[str, Any] | None] = None,
        children: Optional[Children] = None,
        key: Optional[str] = None,
        allow_children=True,
    ):
        self.tag = tag
        # Normalize to None
        self.props = props or None
        self.children = children or None
        self.allow_children = allow_children
        self.key = key or None
        if not self.allow_children and children:
            raise ValueError(f"{self.tag} cannot have children")

    def __getitem__(
        self,
        children_arg: Union[Child, tuple[Child, ...]],
    ):
        """Support indexing syntax: div()[children] or div()["text"]

        Children may include iterables (lists, generators) of nodes, which will
        be flattened during render.
        """
        if not self.allow_children:
            raise ValueError(f"{self.tag} cannot have children")
        if self.children:
            raise ValueError(f"Node already has children: {self.children}")

        if isinstance(children_arg, tuple):
            new_children = cast(list[Child], list(children_arg))
        else:
            new_children = [children_arg]

        return Node(
            tag=self.tag,
            props=self.props,
            children=new_children,
            key=self.key,
            allow_children=self.allow_children,
        )

    def iter_children(self) -> list[NodeTree]:
        """Children with nested iterables flattened and empty slots dropped."""
        return flatten_children(self.children or [])

    def render(self, path: str = "") -> tuple[VDOMNode, Callbacks]:
        """Serialize this tree, collecting callbacks keyed by `<path>.<prop>`."""
        callbacks: Callbacks = {}
        vdom = _render_node(self, path, callbacks)
        return vdom, callbacks


# ----------------------------------------------------------------------------
# Rendering (internal)
# ----------------------------------------------------------------------------


def join_path(prefix: str, part: str | int) -> str:
    if prefix:
        return f"{prefix}.{part}"
    return str(part)


def count_args(fn: Callable) -> int:
    """Positional parameters `fn` accepts; -1 when it takes *args."""
    n_args = 0
    for param in inspect.signature(fn).parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return -1
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            n_args += 1
    return n_args


def flatten_children(children: Children) -> list[NodeTree]:
    out: list[NodeTree] = []
    for child in children:
        # Booleans come from `cond and node` patterns
        if child is None or isinstance(child, bool):
            continue
        if isinstance(child, (Node, str, int, float)):
            out.append(child)
        elif isinstance(child, _Iterable):
            out.extend(flatten_children(list(child)))
        else:
            raise TypeError(f"Invalid child of type {type(child).__name__}: {child!r}")
    return out


def _register_callback(
    callbacks: Callbacks, path: str, prop: str, value: Callable
) -> tuple[str, EventOptions | None]:
    key = join_path(path, prop)
    if isinstance(value, EventHandler):
        callback = Callback(
            fn=value.fn,
            n_args=count_args(value.fn),
            prevent_default=value.prevent_default,
            stop_propagation=value.stop_propagation,
        )
    else:
        callback = Callback(fn=value, n_args=count_args(value))
    callbacks[key] = callback

    options: EventOptions | None = None
    if callback.prevent_default or callback.stop_propagation:
        options = {
            "preventDefault": callback.prevent_default,
            "stopPropagation": callback.stop_propagation,
        }
    return CALLBACK_PREFIX + key, options


def _render_node(node: Node, path: str, callbacks: Callbacks) -> VDOMNode:
    vdom: VDOMNode = {"tag": node.tag}
    if node.key is not None:
        vdom["key"] = node.key

    if node.props:
        props: dict[str, Any] = {}
        event_options: dict[str, EventOptions] = {}
        for name, value in node.props.items():
            if callable(value):
                placeholder, options = _register_callback(callbacks, path, name, value)
                props[name] = placeholder
                if options is not None:
                    event_options[name] = options
            else:
                props[name] = value
        if props:
            vdom["props"] = props
        if event_options:
            vdom["eventOptions"] = event_options

    children = node.iter_children()
    if children:
        rendered: list[VDOMNode | PrimitiveNode] = []
        for i, child in enumerate(children):
            if isinstance(child, Node):
                rendered.append(_render_node(child, join_path(path, i), callbacks))
            else:
                rendered.append(child)
        vdom["children"] = rendered
    return vdom
