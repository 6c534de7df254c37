"""
Module: awssqs.py
Description: AWS SQS notification channel.

Resolves a queue URL from the configured queue name (or the
destination's recipient) and publishes the rendered notification
message, with its message attributes, to that queue.

Key Components:
- AwsSqsService: NotificationService backed by aioboto3
- new_aws_sqs_service(): factory registered with the dispatch framework

Dependencies: aioboto3, botocore, asyncio, logger
"""

import asyncio
import os
from contextlib import AsyncExitStack
from typing import Any, Dict, Optional

from aioboto3 import Session
from botocore.exceptions import BotoCoreError, ClientError, NoRegionError

from sqs_notifier.config.settings import AwsSqsOptions
from sqs_notifier.errors import ConfigLoadError, QueueResolutionError, SendError
from sqs_notifier.models.notification import Destination, Notification
from sqs_notifier.services.base import NotificationService
from sqs_notifier.utils.logger import get_logger

logger = get_logger(__name__)

SQS_SERVICE_NAME = 'sqs'


class AwsSqsService(NotificationService):
    """
    SQS notification channel.

    The aioboto3 session is built once from the options. Each send opens
    its own SQS client unless the service is used as an async context
    manager, in which case one client is shared for the whole block.
    Nested entries share the client opened by the outermost one.

    Example:
        >>> service = AwsSqsService(AwsSqsOptions(queue="alerts", region="eu-west-1"))
        >>> async with service:
        ...     message_id = await service.send(notification, Destination())
    """

    def __init__(self, opts: AwsSqsOptions):
        """
        Initialize the SQS channel.

        Args:
            opts: Channel options

        Raises:
            ValueError: If opts is not an AwsSqsOptions instance
            ConfigLoadError: If the AWS session cannot be created
        """
        if not isinstance(opts, AwsSqsOptions):
            raise ValueError("opts must be an AwsSqsOptions instance")

        self.opts = opts
        self.session = self._new_session()
        self._client = None
        self._exit_stack: Optional[AsyncExitStack] = None
        self._entered = 0

        logger.info(
            "SQS notification service initialized",
            queue=opts.queue,
            account=opts.account or None,
            region=opts.region or None,
            endpoint_url=opts.endpoint_url or None,
            static_credentials=opts.access.is_set,
            delay_seconds=opts.delay_seconds
        )

    def _new_session(self) -> Session:
        kwargs: Dict[str, Any] = {}

        # Static credentials only when both halves are configured
        if self.opts.access.is_set:
            kwargs['aws_access_key_id'] = self.opts.access.key
            kwargs['aws_secret_access_key'] = self.opts.access.secret

        if self.opts.region:
            kwargs['region_name'] = self.opts.region

        try:
            return Session(**kwargs)
        except BotoCoreError as e:
            logger.error("Failed to load AWS configuration", error=str(e))
            raise ConfigLoadError(f"failed to load configuration: {e}") from e

    def client_kwargs(self) -> Dict[str, Any]:
        """
        Keyword arguments for the SQS client.

        The custom endpoint applies to the SQS client only and is signed
        for the configured region, falling back to AWS_DEFAULT_REGION.
        """
        kwargs: Dict[str, Any] = {}
        if self.opts.endpoint_url:
            kwargs['endpoint_url'] = self.opts.endpoint_url
            signing_region = self.opts.region or os.getenv('AWS_DEFAULT_REGION', '')
            if signing_region:
                kwargs['region_name'] = signing_region
        return kwargs

    def resolve_queue_name(self, destination: Destination) -> str:
        """Return the destination's recipient if set, else the configured queue."""
        if destination.recipient:
            return destination.recipient
        return self.opts.queue

    async def _enter_client(self, stack: AsyncExitStack, queue_name: str = ""):
        try:
            return await stack.enter_async_context(
                self.session.client(SQS_SERVICE_NAME, **self.client_kwargs())
            )
        except NoRegionError as e:
            logger.error(
                "Got an error getting the queue URL",
                queue_name=queue_name or None,
                error=str(e)
            )
            raise QueueResolutionError(
                "failed to resolve service endpoint, an AWS region is required, but was not found",
                queue_name=queue_name
            ) from e
        except BotoCoreError as e:
            logger.error("Failed to load AWS configuration", error=str(e))
            raise ConfigLoadError(f"failed to load configuration: {e}") from e

    async def __aenter__(self) -> "AwsSqsService":
        # Only the outermost entry opens the shared client
        self._entered += 1
        if self._entered > 1:
            return self

        stack = AsyncExitStack()
        try:
            self._client = await self._enter_client(stack)
        except BaseException:
            self._entered -= 1
            raise
        self._exit_stack = stack
        logger.debug("SQS client opened for reuse")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._entered == 0:
            return
        self._entered -= 1
        if self._entered > 0:
            return

        stack, self._exit_stack = self._exit_stack, None
        self._client = None
        if stack is not None:
            await stack.aclose()
            logger.debug("SQS client closed")

    async def send(
        self,
        notification: Notification,
        destination: Destination,
        timeout: Optional[float] = None
    ) -> str:
        """
        Publish a notification to its SQS queue.

        Args:
            notification: Rendered notification; message is the body
            destination: Routing target; a recipient overrides the queue
            timeout: Deadline in seconds for the whole call; defaults to
                opts.timeout_seconds, None means no deadline

        Returns:
            Message ID from SQS

        Raises:
            ValueError: If parameters are invalid
            ConfigLoadError: If the SQS client cannot be configured
            QueueResolutionError: If the queue URL cannot be resolved
            SendError: If SendMessage fails
            asyncio.TimeoutError: If the deadline expires
        """
        if not isinstance(notification, Notification):
            raise ValueError("notification must be a Notification instance")
        if not isinstance(destination, Destination):
            raise ValueError("destination must be a Destination instance")

        if timeout is None:
            timeout = self.opts.timeout_seconds

        return await asyncio.wait_for(self._send(notification, destination), timeout)

    async def _send(self, notification: Notification, destination: Destination) -> str:
        queue_name = self.resolve_queue_name(destination)
        if not queue_name:
            raise QueueResolutionError("queue name is required", queue_name=queue_name)

        async with AsyncExitStack() as stack:
            client = self._client
            if client is None:
                client = await self._enter_client(stack, queue_name)

            queue_url = await self._get_queue_url(client, queue_name)
            return await self._send_message(client, queue_url, notification)

    async def _get_queue_url(self, client, queue_name: str) -> str:
        params: Dict[str, Any] = {'QueueName': queue_name}
        if self.opts.account:
            params['QueueOwnerAWSAccountId'] = self.opts.account

        try:
            response = await client.get_queue_url(**params)
        except ClientError as e:
            logger.error(
                "Got an error getting the queue URL",
                queue_name=queue_name,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise QueueResolutionError(
                f"failed to get URL of queue {queue_name!r}: {e}",
                queue_name=queue_name
            ) from e
        except BotoCoreError as e:
            logger.error(
                "Got an error getting the queue URL",
                queue_name=queue_name,
                error=str(e)
            )
            raise QueueResolutionError(
                f"failed to get URL of queue {queue_name!r}: {e}",
                queue_name=queue_name
            ) from e

        return response['QueueUrl']

    async def _send_message(self, client, queue_url: str, notification: Notification) -> str:
        params: Dict[str, Any] = {
            'QueueUrl': queue_url,
            'MessageBody': notification.message,
            'DelaySeconds': self.opts.delay_seconds,
        }

        attributes = message_attributes(notification)
        if attributes:
            params['MessageAttributes'] = attributes

        try:
            response = await client.send_message(**params)
        except ClientError as e:
            logger.error(
                "Got an error sending the message",
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise SendError(f"failed to send message to {queue_url}: {e}", queue_url=queue_url) from e
        except BotoCoreError as e:
            logger.error(
                "Got an error sending the message",
                queue_url=queue_url,
                error=str(e)
            )
            raise SendError(f"failed to send message to {queue_url}: {e}", queue_url=queue_url) from e

        message_id = response['MessageId']
        logger.debug("Message sent", queue_url=queue_url, message_id=message_id)
        return message_id


def message_attributes(notification: Notification) -> Dict[str, Dict[str, str]]:
    """
    Convert rendered attributes to the SendMessage format.

    Empty values are dropped since SQS rejects them.
    """
    if notification.aws_sqs is None:
        return {}

    return {
        name: {'StringValue': value, 'DataType': 'String'}
        for name, value in notification.aws_sqs.message_attributes.items()
        if value
    }


def new_aws_sqs_service(opts: AwsSqsOptions) -> NotificationService:
    """Create the SQS channel for the given options."""
    return AwsSqsService(opts)
