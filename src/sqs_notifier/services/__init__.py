"""
Package: services
Description: Notification channels.

Currently provides the AWS SQS channel.
"""

from .awssqs import AwsSqsService, new_aws_sqs_service
from .base import NotificationService

__all__ = [
    "AwsSqsService",
    "NotificationService",
    "new_aws_sqs_service",
]
