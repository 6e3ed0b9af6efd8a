"""Exceptions raised by the review notifier."""


class NotifierError(Exception):
    """Base exception for all notifier failures."""


class ConfigurationError(NotifierError):
    """A required configuration value is missing or unusable."""

    def __init__(self, message: str, missing: list = None) -> None:
        self.missing = missing or []
        super().__init__(message)


class DeliveryError(NotifierError):
    """The chat webhook rejected the message or could not be reached."""

    def __init__(self, message: str, status_code: int = None, body: str = '') -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class AssignmentError(NotifierError):
    """Adding assignees to a pull request failed."""
