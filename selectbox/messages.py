from typing import Any, Literal, TypedDict

from selectbox.diff import VDOMOperation
from selectbox.vdom import VDOM


# ====================
# Server messages
# ====================
class ServerInitMessage(TypedDict):
    type: Literal["vdom_init"]
    id: str
    vdom: VDOM


class ServerUpdateMessage(TypedDict):
    type: Literal["vdom_update"]
    id: str
    ops: list[VDOMOperation]


class ServerErrorInfo(TypedDict, total=False):
    # High-level human message
    message: str
    # Full stack trace string (server formatted)
    stack: str
    # Which phase failed
    phase: Literal["render", "callback", "mount", "unmount"]
    # Optional extra details (callback key, etc.)
    details: dict[str, Any]


class ServerErrorMessage(TypedDict):
    type: Literal["server_error"]
    id: str
    error: ServerErrorInfo


ServerMessage = ServerInitMessage | ServerUpdateMessage | ServerErrorMessage


# ====================
# Client messages
# ====================
class ClientCallbackMessage(TypedDict):
    type: Literal["callback"]
    id: str
    callback: str
    args: list[Any]


class ClientMountMessage(TypedDict):
    type: Literal["mount"]
    id: str


class ClientUnmountMessage(TypedDict):
    type: Literal["unmount"]
    id: str


ClientMessage = ClientCallbackMessage | ClientMountMessage | ClientUnmountMessage
