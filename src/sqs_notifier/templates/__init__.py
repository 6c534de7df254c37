"""
Package: templates
Description: Template rendering for notification messages and attributes.
"""

from .templater import Templater, new_environment, render_message_attributes, render_template

__all__ = [
    "Templater",
    "new_environment",
    "render_message_attributes",
    "render_template",
]
