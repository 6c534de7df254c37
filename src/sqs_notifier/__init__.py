"""
Package: sqs_notifier
Description: AWS SQS channel for a multi-channel notification service.

Renders templated message attributes and publishes notifications to an
SQS queue resolved from configuration or the destination.
"""

from .config.settings import AwsAccess, AwsSqsOptions, Settings
from .errors import (
    AttributeTemplateError,
    ConfigLoadError,
    MessageTemplateError,
    NotificationError,
    QueueResolutionError,
    SendError,
    TemplateParseError,
)
from .models.notification import AwsSqsNotification, Destination, Notification
from .services.awssqs import AwsSqsService, new_aws_sqs_service
from .services.base import NotificationService

__version__ = "0.1.0"

__all__ = [
    "AwsAccess",
    "AwsSqsOptions",
    "Settings",
    "AttributeTemplateError",
    "ConfigLoadError",
    "MessageTemplateError",
    "NotificationError",
    "QueueResolutionError",
    "SendError",
    "TemplateParseError",
    "AwsSqsNotification",
    "Destination",
    "Notification",
    "AwsSqsService",
    "NotificationService",
    "new_aws_sqs_service",
]
