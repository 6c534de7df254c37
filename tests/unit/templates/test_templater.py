"""
Module: test_templater.py
Description: Unit tests for notification and message attribute templating.

Covers message rendering, attribute rendering, the skip-on-syntax-error
and abort-on-render-error policies, and lazy creation of the SQS payload.
"""

import pytest

from sqs_notifier.errors import AttributeTemplateError, MessageTemplateError, NotificationError, TemplateParseError
from sqs_notifier.models.notification import AwsSqsNotification, Notification
from sqs_notifier.templates.templater import new_environment, render_message_attributes, render_template


def _boom():
    raise RuntimeError("lookup failed")


class TestNotificationTemplater:
    """Test cases for Notification.get_templater."""

    def test_renders_message_and_attributes(self):
        source = Notification(
            message="{{ message }}",
            aws_sqs=AwsSqsNotification(
                message_attributes={"attributeKey": "{{ messageAttributeValue }}"}
            )
        )
        templater = source.get_templater("", {})

        notification = Notification()
        templater(notification, {
            "message": "abcdef",
            "messageAttributeValue": "123456",
        })

        assert notification.message == "abcdef"
        assert notification.aws_sqs.message_attributes == {"attributeKey": "123456"}

    def test_message_syntax_error(self):
        with pytest.raises(TemplateParseError):
            Notification(message="{{ message").get_templater("alert", {})

    def test_message_render_error(self):
        """Test render failures in the message are reported as channel errors."""
        templater = Notification(message="{{ boom() }}").get_templater("alert", {"boom": _boom})

        with pytest.raises(MessageTemplateError) as exc_info:
            templater(Notification(), {})

        assert isinstance(exc_info.value, NotificationError)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_without_sqs_payload(self):
        notification = Notification()
        Notification(message="hi {{ name }}").get_templater("", None)(notification, {"name": "ops"})

        assert notification.message == "hi ops"
        assert notification.aws_sqs is None

    def test_functions_available_in_message(self):
        templater = Notification(message="{{ shout(name) }}").get_templater("", {"shout": str.upper})

        notification = Notification()
        templater(notification, {"name": "ops"})

        assert notification.message == "OPS"


class TestAwsSqsTemplater:
    """Test cases for AwsSqsNotification.get_templater."""

    def test_all_attributes_rendered(self):
        source = AwsSqsNotification(message_attributes={
            "app": "{{ app }}",
            "revision": "{{ revision }}",
            "static": "fixed",
        })
        notification = Notification()

        source.get_templater("", {})(notification, {"app": "guestbook", "revision": "a1b2c3"})

        assert notification.aws_sqs.message_attributes == {
            "app": "guestbook",
            "revision": "a1b2c3",
            "static": "fixed",
        }

    def test_payload_created_lazily(self):
        notification = Notification()

        AwsSqsNotification().get_templater("", {})(notification, {})

        assert notification.aws_sqs is not None
        assert notification.aws_sqs.message_attributes == {}

    def test_source_attributes_not_mutated(self):
        source = AwsSqsNotification(message_attributes={"app": "{{ app }}"})

        source.get_templater("", {})(Notification(), {"app": "guestbook"})

        assert source.message_attributes == {"app": "{{ app }}"}

    def test_syntax_error_keeps_raw_text(self):
        source = AwsSqsNotification(message_attributes={
            "broken": "{{ app",
            "app": "{{ app }}",
        })
        notification = Notification()

        source.get_templater("", {})(notification, {"app": "guestbook"})

        assert notification.aws_sqs.message_attributes == {
            "broken": "{{ app",
            "app": "guestbook",
        }

    def test_empty_render_keeps_raw_text(self):
        source = AwsSqsNotification(message_attributes={"missing": "{{ missing }}"})
        notification = Notification()

        source.get_templater("", {})(notification, {})

        assert notification.aws_sqs.message_attributes == {"missing": "{{ missing }}"}

    def test_render_error_aborts(self):
        source = AwsSqsNotification(message_attributes={
            "first": "{{ boom() }}",
            "second": "{{ app }}",
        })
        notification = Notification()

        with pytest.raises(AttributeTemplateError) as exc_info:
            source.get_templater("deploy", {"boom": _boom})(notification, {"app": "guestbook"})

        assert exc_info.value.attribute == "first"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert notification.aws_sqs.message_attributes["second"] == "{{ app }}"

    def test_functions_available_in_attributes(self):
        source = AwsSqsNotification(message_attributes={"app": "{{ shout(app) }}"})
        notification = Notification()

        source.get_templater("", {"shout": str.upper})(notification, {"app": "guestbook"})

        assert notification.aws_sqs.message_attributes == {"app": "GUESTBOOK"}


class TestRenderHelpers:
    """Test cases for the rendering helpers."""

    def test_render_template(self):
        env = new_environment()

        assert render_template(env, "{{ a }}-{{ b }}", {"a": 1, "b": "two"}) == "1-two"

    def test_render_message_attributes_in_place(self):
        attributes = {"severity": "{{ level | lower }}"}

        render_message_attributes(attributes, "alert", None, {"level": "CRITICAL"})

        assert attributes == {"severity": "critical"}

    def test_aliases_accepted(self):
        notification = Notification.model_validate({
            "message": "hello",
            "awsSqs": {"messageAttributes": {"team": "platform"}},
        })

        assert notification.aws_sqs.message_attributes == {"team": "platform"}
