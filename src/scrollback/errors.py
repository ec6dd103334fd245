"""Error taxonomy for window operations.

Every error here is recovered at the command dispatch boundary; none of
them is meant to crash the UI or the CLI.
"""


class WindowError(Exception):
    """Base class for window synchronization errors."""


class MessageNotFoundError(WindowError):
    """Target message id is absent from the log.

    Can legitimately happen when a reply points at stale data.
    """

    def __init__(self, message_id: str):
        super().__init__(f"Message not found: {message_id!r}")
        self.message_id = message_id


class FetchFailure(WindowError):
    """Reading a batch from the log source failed."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


class StaleCompletionError(WindowError):
    """An extension resolved after the window it was based on changed.

    Raised when the epoch moved (a jump replaced the window) or the edge the
    batch was computed from is no longer the window's edge. The batch has
    been discarded and the window left untouched.
    """

    def __init__(
        self,
        operation: str,
        issued_epoch: int,
        current_epoch: int,
        anchor_id: str | None = None,
    ):
        if issued_epoch != current_epoch:
            reason = f"epoch moved from {issued_epoch} to {current_epoch}"
        else:
            reason = f"window edge moved away from message {anchor_id!r}"
        super().__init__(f"{operation} resolved stale ({reason}); batch discarded")
        self.operation = operation
        self.issued_epoch = issued_epoch
        self.current_epoch = current_epoch
        self.anchor_id = anchor_id
