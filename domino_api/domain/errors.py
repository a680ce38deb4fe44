"""Typed failures raised by the domain layer.

The domain never maps these to transport responses; the boundary reads
``status_kind`` to pick a client or server error.
"""


class DominoError(Exception):
    status_kind = "server"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedInput(DominoError):
    """The request failed structural validation (bad bone, duplicates, empty hand)."""

    status_kind = "client"


class InvalidLayout(DominoError):
    """The table's bones do not form a single open chain."""

    status_kind = "client"


class InternalEngineError(DominoError):
    """An invariant inside the engine was broken."""

    status_kind = "server"
