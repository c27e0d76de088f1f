"""Errors raised by the quiz core."""


class StoreUnavailable(Exception):
    """The relational store failed or did not answer in time.

    Mapped to a generic 500 response; the original exception is kept as
    ``__cause__`` for logging only and never shown to the client.
    """

    def __init__(self, operation: str):
        super().__init__(f"store unavailable during {operation}")
        self.operation = operation
