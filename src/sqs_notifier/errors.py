"""
Module: errors.py
Description: Exceptions raised by the SQS notification channel.

Every failure the channel reports to its caller derives from
NotificationError. The underlying boto or jinja2 exception is kept as
__cause__.
"""


class NotificationError(Exception):
    """Base class for notification channel failures."""


class ConfigLoadError(NotificationError):
    """Raised when AWS session or client configuration cannot be loaded."""


class QueueResolutionError(NotificationError):
    """Raised when the queue URL cannot be resolved."""

    def __init__(self, message: str, queue_name: str = ""):
        super().__init__(message)
        self.queue_name = queue_name


class SendError(NotificationError):
    """Raised when SendMessage fails."""

    def __init__(self, message: str, queue_url: str = ""):
        super().__init__(message)
        self.queue_url = queue_url


class TemplateParseError(NotificationError):
    """Raised when the notification message template has invalid syntax."""


class AttributeTemplateError(NotificationError):
    """Raised when rendering a message attribute template fails."""

    def __init__(self, message: str, attribute: str = ""):
        super().__init__(message)
        self.attribute = attribute


class MessageTemplateError(NotificationError):
    """Raised when rendering the notification message template fails."""
