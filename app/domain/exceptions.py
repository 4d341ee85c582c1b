from __future__ import annotations


class StructuredOutputError(Exception):
    """Raised when model text cannot be converted into the requested record.

    The message never includes the model output itself.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
