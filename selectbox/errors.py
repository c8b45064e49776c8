class SelectboxError(Exception):
    """Base class for errors raised at the edges of the widget.

    The state machine itself never raises: every intent is valid in every state.
    """


class CallbackNotFoundError(SelectboxError, KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Missing callback '{self.key}'"


class SessionNotMountedError(SelectboxError, RuntimeError):
    pass


class CatalogError(SelectboxError, ValueError):
    """A catalog could not be read as (label, payload) pairs."""
