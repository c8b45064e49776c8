"""
A mounted widget instance driven by a host.

The session owns one `SelectState`. A host mounts it, forwards DOM events as
callback invocations, and applies the `vdom_update` operations it receives.
Every callback runs to completion (transition, render, diff) before listeners
are notified.
"""

import logging
import traceback
import uuid
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar

from selectbox.config import ViewConfig
from selectbox.diff import diff_vdom
from selectbox.errors import CallbackNotFoundError, SessionNotMountedError
from selectbox.intents import Intent, ReplaceItems
from selectbox.messages import (
    ClientMessage,
    ServerErrorMessage,
    ServerInitMessage,
    ServerMessage,
    ServerUpdateMessage,
)
from selectbox.state import ItemLike, SelectState, get_value
from selectbox.update import transition
from selectbox.vdom import Callbacks, VDOMNode
from selectbox.view import render

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WidgetSession(Generic[T]):
    def __init__(
        self,
        state: SelectState[T],
        config: Optional[ViewConfig] = None,
        id: Optional[str] = None,
    ) -> None:
        self.id = id or uuid.uuid4().hex
        self.config = config
        self.message_listeners: set[Callable[[ServerMessage], Any]] = set()
        self.callbacks: Callbacks = {}
        self._state = state
        self._vdom: VDOMNode | None = None

    @property
    def state(self) -> SelectState[T]:
        return self._state

    @property
    def value(self) -> Optional[T]:
        return get_value(self._state)

    @property
    def mounted(self) -> bool:
        return self._vdom is not None

    @property
    def vdom(self) -> VDOMNode:
        if self._vdom is None:
            raise SessionNotMountedError(f"Session '{self.id}' is not mounted")
        return self._vdom

    def connect(self, message_listener: Callable[[ServerMessage], Any]):
        self.message_listeners.add(message_listener)
        # Use `discard` since there are two ways of disconnecting a listener
        return lambda: self.message_listeners.discard(message_listener)

    def disconnect(self, message_listener: Callable[[ServerMessage], Any]):
        self.message_listeners.discard(message_listener)

    def notify(self, message: ServerMessage):
        for listener in list(self.message_listeners):
            listener(message)

    def report_error(
        self,
        phase: str,
        exc: Exception,
        details: dict[str, Any] | None = None,
    ):
        logger.error(f"Widget '{self.id}' failed during {phase}: {exc}")
        error_msg: ServerErrorMessage = {
            "type": "server_error",
            "id": self.id,
            "error": {
                "message": str(exc),
                "stack": "".join(
                    traceback.format_exception(type(exc), exc, exc.__traceback__)
                ),
                "phase": phase,  # type: ignore
                "details": details or {},
            },
        }
        self.notify(error_msg)

    def mount(self):
        if self.mounted:
            logger.error(f"Widget already mounted: '{self.id}'")
            return
        try:
            vdom, callbacks = render(self._state, self.config).render()
        except Exception as e:  # noqa: BLE001 - forward to the host
            self.report_error("mount", e)
            return
        self._vdom = vdom
        self.callbacks = callbacks
        logger.debug(f"Mounted widget '{self.id}'")
        self.notify(ServerInitMessage(type="vdom_init", id=self.id, vdom=vdom))

    def unmount(self):
        if not self.mounted:
            return
        self._vdom = None
        self.callbacks = {}
        logger.debug(f"Unmounted widget '{self.id}'")

    def close(self):
        self.message_listeners.clear()
        self.unmount()

    def execute_callback(self, key: str, args: Sequence[Any] = ()):
        try:
            callback = self.callbacks.get(key)
            if callback is None:
                raise CallbackNotFoundError(key)
            args = list(args)
            if callback.n_args >= 0:
                args = args[: callback.n_args]
            intent = callback.fn(*args)
        except Exception as e:  # noqa: BLE001 - forward to the host
            self.report_error("callback", e, {"callback": key})
            return
        # Handlers return None for events they ignore (e.g. non-Enter keys)
        if intent is not None:
            self.dispatch(intent)

    def dispatch(self, intent: Intent) -> SelectState[T]:
        self._state = transition(intent, self._state)
        logger.debug(f"Widget '{self.id}' applied {intent!r}")
        if self.mounted:
            self._rerender()
        return self._state

    def replace_items(
        self,
        items: Iterable[ItemLike[T]],
        selection: Optional[ItemLike[T]] = None,
    ) -> SelectState[T]:
        return self.dispatch(ReplaceItems(items, selection))

    def handle_message(self, message: ClientMessage):
        if message["id"] != self.id:
            logger.warning(
                f"Ignoring message for widget '{message['id']}' in session '{self.id}'"
            )
            return
        if message["type"] == "callback":
            self.execute_callback(message["callback"], message.get("args", []))
        elif message["type"] == "mount":
            self.mount()
        elif message["type"] == "unmount":
            self.unmount()
        else:
            logger.warning(f"Unknown message type: {message['type']!r}")

    def _rerender(self):
        try:
            new_vdom, callbacks = render(self._state, self.config).render()
            operations = diff_vdom(self._vdom, new_vdom)
        except Exception as e:  # noqa: BLE001 - forward to the host
            self.report_error("render", e)
            return
        self._vdom = new_vdom
        self.callbacks = callbacks
        if operations:
            self.notify(
                ServerUpdateMessage(type="vdom_update", id=self.id, ops=operations)
            )
