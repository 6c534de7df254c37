"""
Module: templater.py
Description: Jinja2 rendering helpers for notification templates.

The dispatch framework renders a notification once per send. Message
bodies must parse; message attribute templates that fail to parse are
left as raw text, while render failures abort the whole step.

Key Components:
- Templater: signature of a composable rendering step
- new_environment(): Jinja2 environment with extension functions bound
- render_template(): parse and render one template string
- render_message_attributes(): in-place attribute rendering

Dependencies: jinja2, typing, logger
"""

from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import Environment, TemplateSyntaxError, Undefined

from sqs_notifier.errors import AttributeTemplateError
from sqs_notifier.utils.logger import get_logger

logger = get_logger(__name__)

# Mutates the target notification in place, raises on failure
Templater = Callable[[Any, Dict[str, Any]], None]

FuncMap = Mapping[str, Callable[..., Any]]


def new_environment(funcs: Optional[FuncMap] = None) -> Environment:
    """
    Build a text-mode Jinja2 environment.

    Args:
        funcs: Extension functions callable from template expressions

    Returns:
        Environment with funcs available as globals
    """
    env = Environment(autoescape=False, undefined=Undefined, keep_trailing_newline=True)
    if funcs:
        env.globals.update(funcs)
    return env


def render_template(env: Environment, source: str, variables: Mapping[str, Any]) -> str:
    """
    Parse and render a single template string.

    Raises:
        TemplateSyntaxError: If source does not parse
        Exception: Whatever the template raises while rendering
    """
    return env.from_string(source).render(**variables)


def render_message_attributes(
    attributes: Dict[str, str],
    name: str,
    funcs: Optional[FuncMap],
    variables: Mapping[str, Any]
) -> None:
    """
    Render message attribute templates in place.

    Attributes whose template does not parse are skipped and keep their
    raw text. A non-empty rendering replaces the value; an empty one
    leaves the raw text.

    Args:
        attributes: Attribute name to template mapping, updated in place
        name: Template name used in logs and errors
        funcs: Extension functions callable from templates
        variables: Variables bound during rendering

    Raises:
        AttributeTemplateError: On the first attribute that fails to render
    """
    env = new_environment(funcs)

    for key, source in list(attributes.items()):
        try:
            template = env.from_string(source)
        except TemplateSyntaxError as e:
            logger.debug(
                "Skipping unparsable message attribute template",
                template_name=name,
                attribute=key,
                error=str(e)
            )
            continue

        try:
            value = template.render(**variables)
        except Exception as e:
            logger.error(
                "Failed to render message attribute",
                template_name=name,
                attribute=key,
                error=str(e),
                error_type=type(e).__name__
            )
            raise AttributeTemplateError(
                f"template {name!r}: attribute {key!r}: {e}",
                attribute=key
            ) from e

        if value != "":
            attributes[key] = value
