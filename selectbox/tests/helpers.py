from selectbox.state import Item

FRUITS = [Item("Apple", 1), Item("Banana", 2), Item("Avocado", 3)]


def find_by_tag(vdom, tag: str) -> list[dict]:
    """All VDOM nodes with `tag`, in document order."""
    found = []
    if isinstance(vdom, dict):
        if vdom.get("tag") == tag:
            found.append(vdom)
        for child in vdom.get("children") or []:
            found.extend(find_by_tag(child, tag))
    return found


def class_of(vdom: dict) -> str:
    return (vdom.get("props") or {}).get("className", "")
