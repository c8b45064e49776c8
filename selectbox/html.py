from typing import Any, Optional

from selectbox.vdom import Child, Node, NodeTree

__all__ = [
    # Core functions
    "define_tag",
    "define_void_tag",
    "render_html",
    # Standard tags
    "a",
    "div",
    "i",
    "li",
    "p",
    "span",
    "ul",
    # Void tags
    "input",
]


def define_tag(name: str, default_props: dict[str, Any] | None = None):
    """
    Defines a standard tag with optional default props.

    The returned function can be called in these ways:
    1. tag() / tag(**props) -> Node (can use indexing syntax)
    2. tag(*children, **props) -> Node with children (indexing not allowed)
    3. tag(**props)[children] -> Node with children
    """

    default_props = default_props or {}

    def create_element(*children: Child, key: Optional[str] = None, **props: Any):
        return Node(
            tag=name,
            props=default_props | props,
            children=list(children) or None,
            key=key,
        )

    return create_element


def define_void_tag(name: str, default_props: dict[str, Any] | None = None):
    """
    Defines a void tag (e.g. <input />). Void tags cannot have children and
    indexing them raises.
    """
    default_props = default_props or {}

    def create_element(key: Optional[str] = None, **props: Any):
        return Node(
            tag=name,
            props=default_props | props,
            key=key,
            allow_children=False,
        )

    return create_element


def render_html(node: NodeTree, indent: int = 2, level: int = 0) -> str:
    """Render a tree as static HTML. Callback props are dropped."""
    lines: list[str] = []
    _render_into(node, lines, " " * indent, level)
    separator = "\n" if indent > 0 else ""
    return separator.join(lines)


def _render_into(node: NodeTree, lines: list[str], indent: str, level: int):
    offset = indent * level

    if not isinstance(node, Node):
        if node is not None:
            lines.append(offset + _escape(str(node)))
        return

    open_tag = _build_open_tag(node)

    if not node.allow_children:
        lines.append(offset + open_tag)
        return

    closing_tag = f"</{node.tag}>"
    children = node.iter_children()
    # If no children, render everything onto a single line
    if not children:
        lines.append(offset + open_tag + closing_tag)
        return

    # A lone text child stays on the tag's line
    if len(children) == 1 and not isinstance(children[0], Node):
        lines.append(offset + open_tag + _escape(str(children[0])) + closing_tag)
        return

    lines.append(offset + open_tag)
    for child in children:
        _render_into(child, lines, indent, level + 1)
    lines.append(offset + closing_tag)


def _build_open_tag(node: Node) -> str:
    """Build the opening tag with attributes."""
    tag = f"<{node.tag}"
    for key, val in (node.props or {}).items():
        if callable(val) or val is None or val is False:
            continue
        key = attrs_map.get(key, key)
        if val is True:
            tag += f" {key}"
        else:
            tag += f' {key}="{_escape(str(val))}"'
    tag += " />" if not node.allow_children else ">"
    return tag


# React-style prop names to their HTML attribute
attrs_map = {"className": "class", "htmlFor": "for"}


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


a = define_tag("a", default_props={"href": "#"})
div = define_tag("div")
i = define_tag("i")
li = define_tag("li")
p = define_tag("p")
span = define_tag("span")
ul = define_tag("ul")

input = define_void_tag("input", default_props={"type": "text"})
