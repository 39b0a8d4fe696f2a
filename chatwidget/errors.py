# errors.py

class ChatWidgetError(Exception):
    """Base class for errors raised inside the widget."""


class ResponderError(ChatWidgetError):
    """The responder could not produce a usable reply."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class StoreError(ChatWidgetError):
    """The durable local store could not be read or written."""
