"""
VDOM diffing between two renders of a widget.

Pure functions comparing VDOM trees and producing the update operations a
host applies to its copy of the tree. Keyed children are reconciled by key,
unkeyed children by position.
"""

from typing import (
    Literal,
    Optional,
    Sequence,
    TypedDict,
    Union,
)

from selectbox.vdom import VDOM, Props, join_path


class InsertOperation(TypedDict):
    type: Literal["insert"]
    path: str
    data: VDOM


class RemoveOperation(TypedDict):
    type: Literal["remove"]
    path: str
    data: Optional[str]  # optional key, for keyed removals


class ReplaceOperation(TypedDict):
    type: Literal["replace"]
    path: str
    data: VDOM


class UpdatePropsOperation(TypedDict):
    type: Literal["update_props"]
    path: str
    data: Props


class MoveOperationData(TypedDict):
    from_index: int
    to_index: int
    key: str


class MoveOperation(TypedDict):
    type: Literal["move"]
    path: str
    data: MoveOperationData


VDOMOperation = Union[
    InsertOperation,
    RemoveOperation,
    ReplaceOperation,
    UpdatePropsOperation,
    MoveOperation,
]


def _is_keyed(node: VDOM) -> bool:
    return isinstance(node, dict) and "key" in node


def diff_vdom(
    old_node: Optional[VDOM], new_node: Optional[VDOM], path: str = ""
) -> list[VDOMOperation]:
    """
    Compare two VDOM trees and produce update operations.

    Args:
        old_node: The previous VDOM or primitive (or None for initial render)
        new_node: The new VDOM or primitive (or None for removal)
        path: Current path in the tree (dot-separated string)
    """
    if old_node is None and new_node is None:
        return []
    elif old_node is None:
        return [{"type": "insert", "path": path, "data": new_node}]
    elif new_node is None:
        return [{"type": "remove", "path": path, "data": None}]

    if old_node == new_node:
        return []

    if (
        isinstance(old_node, dict)
        and isinstance(new_node, dict)
        and old_node.get("tag") == new_node.get("tag")
        and old_node.get("key") == new_node.get("key")
        # Handler options are fixed per element; a change means a different element
        and old_node.get("eventOptions") == new_node.get("eventOptions")
    ):
        operations: list[VDOMOperation] = []
        old_props = old_node.get("props", {})
        new_props = new_node.get("props", {})
        if old_props != new_props:
            operations.append(
                {"type": "update_props", "path": path, "data": new_props}
            )

        old_children = old_node.get("children", []) or []
        new_children = new_node.get("children", []) or []
        operations.extend(_diff_node_children(old_children, new_children, path))
        return operations

    # At least one is primitive or the elements differ - replace
    return [{"type": "replace", "path": path, "data": new_node}]


def _diff_node_children(
    old_children: Sequence[VDOM], new_children: Sequence[VDOM], path: str
) -> list[VDOMOperation]:
    if any(_is_keyed(c) for c in old_children) or any(
        _is_keyed(c) for c in new_children
    ):
        return _diff_keyed_node_children(old_children, new_children, path)
    return _diff_positional_node_children(old_children, new_children, path)


def _diff_keyed_node_children(
    old_children: Sequence[VDOM], new_children: Sequence[VDOM], path: str
) -> list[VDOMOperation]:
    operations: list[VDOMOperation] = []

    old_keyed = {}
    old_positions = {}
    new_keys = set()
    for i, child in enumerate(old_children):
        if _is_keyed(child):
            old_keyed[child["key"]] = child  # type: ignore[index]
            old_positions[child["key"]] = i  # type: ignore[index]
    for child in new_children:
        if _is_keyed(child):
            new_keys.add(child["key"])  # type: ignore[index]

    used_old_positions = set()

    for new_index, new_child in enumerate(new_children):
        child_path = join_path(path, new_index)

        if _is_keyed(new_child):
            key = new_child["key"]  # type: ignore[index]
            if key in old_keyed:
                old_index = old_positions[key]
                used_old_positions.add(old_index)
                if old_index != new_index:
                    operations.append(
                        {
                            "type": "move",
                            "path": child_path,
                            "data": {
                                "from_index": old_index,
                                "to_index": new_index,
                                "key": key,
                            },
                        }
                    )
                operations.extend(diff_vdom(old_keyed[key], new_child, child_path))
            else:
                operations.append(
                    {"type": "insert", "path": child_path, "data": new_child}
                )
        else:
            # Unkeyed new element - try to match positionally
            if (
                new_index < len(old_children)
                and new_index not in used_old_positions
                and not _is_keyed(old_children[new_index])
            ):
                used_old_positions.add(new_index)
                operations.extend(
                    diff_vdom(old_children[new_index], new_child, child_path)
                )
            else:
                operations.append(
                    {"type": "insert", "path": child_path, "data": new_child}
                )

    for key, old_index in old_positions.items():
        if key not in new_keys:
            operations.append(
                {"type": "remove", "path": join_path(path, old_index), "data": key}
            )

    for old_index, old_child in enumerate(old_children):
        if old_index not in used_old_positions and not _is_keyed(old_child):
            operations.append(
                {"type": "remove", "path": join_path(path, old_index), "data": None}
            )

    return operations


def _diff_positional_node_children(
    old_children: Sequence[VDOM], new_children: Sequence[VDOM], path: str
) -> list[VDOMOperation]:
    operations: list[VDOMOperation] = []
    # Trailing removals go last-to-first so earlier indices stay valid
    removals: list[VDOMOperation] = []

    for i in range(max(len(old_children), len(new_children))):
        child_path = join_path(path, i)
        if i < len(old_children) and i < len(new_children):
            operations.extend(diff_vdom(old_children[i], new_children[i], child_path))
        elif i < len(new_children):
            operations.append(
                {"type": "insert", "path": child_path, "data": new_children[i]}
            )
        else:
            removals.append({"type": "remove", "path": child_path, "data": None})

    operations.extend(reversed(removals))
    return operations
