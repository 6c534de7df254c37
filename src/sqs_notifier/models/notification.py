"""
Module: notification.py
Description: Notification data models consumed by the SQS channel.

Defines the notification, its SQS-specific payload and the destination
handed to a channel by the dispatch framework. Both notification models
can produce a Templater that renders them against runtime variables.

Key Components:
- AwsSqsNotification: SQS payload with templated message attributes
- Notification: Rendered message text plus per-channel payloads
- Destination: Routing target with an optional recipient override

Dependencies: pydantic, jinja2 (via templates), typing
"""

from typing import Any, Dict, Optional

from jinja2 import TemplateSyntaxError
from pydantic import BaseModel, ConfigDict, Field

from sqs_notifier.errors import MessageTemplateError, TemplateParseError
from sqs_notifier.templates.templater import (
    FuncMap,
    Templater,
    new_environment,
    render_message_attributes,
    render_template,
)


class AwsSqsNotification(BaseModel):
    """
    SQS-specific part of a notification.

    Attributes:
        message_attributes: Attribute name to value; values are templates
            until the templater has run
    """

    model_config = ConfigDict(populate_by_name=True)

    message_attributes: Dict[str, str] = Field(
        default_factory=dict,
        alias="messageAttributes",
        description="SQS message attributes, templated"
    )

    def get_templater(self, name: str, funcs: Optional[FuncMap] = None) -> Templater:
        """
        Build a rendering step for the message attributes.

        The step creates the SQS payload on the target notification if it
        is missing, copies this payload's attributes onto it and renders
        them with the supplied variables.

        Args:
            name: Template name used in logs and errors
            funcs: Extension functions callable from templates

        Returns:
            Templater applying to a target Notification
        """
        def templater(notification: "Notification", variables: Dict[str, Any]) -> None:
            if notification.aws_sqs is None:
                notification.aws_sqs = AwsSqsNotification()

            if self.message_attributes:
                notification.aws_sqs.message_attributes = dict(self.message_attributes)
                render_message_attributes(
                    notification.aws_sqs.message_attributes,
                    name,
                    funcs,
                    variables
                )

        return templater


class Notification(BaseModel):
    """
    Notification handed to a channel.

    Attributes:
        message: Message body, templated until rendered
        aws_sqs: Optional SQS payload
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(default="", description="Message body")
    aws_sqs: Optional[AwsSqsNotification] = Field(
        default=None,
        alias="awsSqs",
        description="SQS channel payload"
    )

    def get_templater(self, name: str, funcs: Optional[FuncMap] = None) -> Templater:
        """
        Build a rendering step for the whole notification.

        The returned step raises MessageTemplateError when the message
        fails to render.

        Raises:
            TemplateParseError: If the message template does not parse
        """
        env = new_environment(funcs)
        source = self.message
        try:
            env.parse(source)
        except TemplateSyntaxError as e:
            raise TemplateParseError(f"template {name!r}: {e}") from e

        channel_templaters = []
        if self.aws_sqs is not None:
            channel_templaters.append(self.aws_sqs.get_templater(name, funcs))

        def templater(notification: "Notification", variables: Dict[str, Any]) -> None:
            try:
                notification.message = render_template(env, source, variables)
            except Exception as e:
                raise MessageTemplateError(f"template {name!r}: {e}") from e
            for channel_templater in channel_templaters:
                channel_templater(notification, variables)

        return templater


class Destination(BaseModel):
    """
    Routing target for a notification.

    Attributes:
        service: Name of the channel the destination belongs to
        recipient: Channel-specific recipient; for SQS a queue name that
            overrides the configured one
    """

    service: str = Field(default="", description="Channel name")
    recipient: str = Field(default="", description="Recipient override")
