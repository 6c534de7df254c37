"""
Module: conftest.py
Description: Shared pytest fixtures for SQS notifier tests.

Provides channel options, sample notifications and a fake SQS client
that stands in for the aioboto3 client in unit tests. Integration
tests run against a moto server instead.
"""

import os
import pytest

from sqs_notifier.config.settings import AwsAccess, AwsSqsOptions
from sqs_notifier.models.notification import AwsSqsNotification, Destination, Notification

from tests.fakes import FakeClientContext, FakeSqsClient


@pytest.fixture(autouse=True)
def clean_sqs_env(monkeypatch):
    """Keep AWS_SQS_* variables from the host out of option loading."""
    for name in list(os.environ):
        if name.upper().startswith("AWS_SQS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sqs_options():
    """Provide channel options with static test credentials."""
    return AwsSqsOptions(
        queue="test-queue",
        region="us-east-1",
        access=AwsAccess(key="testing", secret="testing"),
    )


@pytest.fixture
def fake_sqs_client():
    return FakeSqsClient()


@pytest.fixture
def fake_client_context(fake_sqs_client):
    return FakeClientContext(fake_sqs_client)


@pytest.fixture
def sample_notification():
    """Provide a rendered notification with one message attribute."""
    return Notification(
        message="deployment finished",
        aws_sqs=AwsSqsNotification(
            message_attributes={"environment": "production"}
        ),
    )


@pytest.fixture
def empty_destination():
    return Destination()
