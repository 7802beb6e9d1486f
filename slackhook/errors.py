"""
Exceptions raised by the Slackhook notification pipeline.

A remote endpoint that answers with something other than "ok" is not an
error here: the notifier logs it and returns False.
"""


class SlackNotificationError(Exception):
    """Base class for all Slackhook errors."""


class UnknownTrigger(SlackNotificationError, ValueError):
    """The trigger name is not one of the registered job events."""

    def __init__(self, trigger: str):
        super().__init__(f"Unknown trigger type: [{trigger}].")
        self.trigger = trigger


class TemplateRenderError(SlackNotificationError):
    """A message template could not be found or rendered."""

    def __init__(self, message: str, template: str | None = None):
        super().__init__(message)
        self.template = template


class InvalidWebhookURL(SlackNotificationError, ValueError):
    """The configured webhook URL is missing or malformed."""


class DeliveryError(SlackNotificationError):
    """Transport failure while posting to or reading from the webhook."""
