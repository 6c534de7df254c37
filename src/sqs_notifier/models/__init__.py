"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the models exchanged with the dispatch framework:
- Notification: Message plus per-channel payloads
- AwsSqsNotification: SQS message attributes
- Destination: Routing target with recipient override
"""

from .notification import AwsSqsNotification, Destination, Notification

__all__ = [
    "AwsSqsNotification",
    "Destination",
    "Notification",
]
