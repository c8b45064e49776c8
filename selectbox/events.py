"""
DOM event payloads forwarded by a host to the widget's callbacks.

Only the fields the widget reads are described. Hosts may send more; they are
ignored. Field names follow the snake_case convention of the wire format.
"""

from typing import Any, TypedDict

ENTER_KEY_CODE = 13


class EventTarget(TypedDict, total=False):
    value: str


class SyntheticEvent(TypedDict, total=False):
    target: EventTarget
    type: str
    default_prevented: bool


class MouseEvent(SyntheticEvent, total=False):
    button: int
    alt_key: bool
    ctrl_key: bool
    meta_key: bool
    shift_key: bool


class KeyboardEvent(SyntheticEvent, total=False):
    key: str
    key_code: int
    alt_key: bool
    ctrl_key: bool
    meta_key: bool
    shift_key: bool


class FormEvent(SyntheticEvent, total=False):
    pass


def is_enter(event: KeyboardEvent | dict[str, Any]) -> bool:
    """True for the Enter key, by key code or, failing that, by key name."""
    key_code = event.get("key_code")
    if key_code is not None:
        return key_code == ENTER_KEY_CODE
    return event.get("key") == "Enter"


def target_value(event: FormEvent | dict[str, Any]) -> str:
    """Current value of the input that raised `event`."""
    target = event.get("target") or {}
    return target.get("value") or ""
