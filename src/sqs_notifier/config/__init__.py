"""
Package: config
Description: Configuration models for the SQS notification channel.
"""

from .settings import AwsAccess, AwsSqsOptions, Settings, DEFAULT_DELAY_SECONDS

__all__ = [
    "AwsAccess",
    "AwsSqsOptions",
    "Settings",
    "DEFAULT_DELAY_SECONDS",
]
