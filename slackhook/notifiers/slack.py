"""
Slack incoming-webhook notifier for Slackhook.
"""

from typing import Any

from slackhook.config import NotifierSettings, resolve_config
from slackhook.core import NotificationPlugin
from slackhook.dispatcher import WebhookDispatcher, encode_payload
from slackhook.logging_config import get_logger
from slackhook.registry import register_notifier
from slackhook.renderer import TemplateRenderer
from slackhook.triggers import lookup

logger = get_logger(__name__)


@register_notifier("slack")
class SlackNotifier(NotificationPlugin):
    """
    Sends job notifications to a Slack channel via an incoming webhook.

    Setup and transport problems raise (UnknownTrigger, TemplateRenderError,
    InvalidWebhookURL, DeliveryError). A reachable webhook that does not
    answer "ok" is logged and reported as False.

    Config:
        webhook_url_override: Optional webhook URL replacing the project one
        slack_template: Optional template name replacing the trigger default
        slack_channel_override: Optional channel
        slack_username_override: Optional bot username
        slack_icon_override: Optional icon (":emoji:" or image URL)
        template_dir: Operator template directory (default: /etc/slackhook)
        timeout_seconds: HTTP timeout (default: 10)
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        renderer: TemplateRenderer | None = None,
        dispatcher: WebhookDispatcher | None = None
    ) -> None:
        super().__init__(config or {})
        self.settings = NotifierSettings.model_validate(self.config)
        self.overrides = self.settings.overrides()
        self.renderer = renderer or TemplateRenderer(self.settings.template_dir)
        self.dispatcher = dispatcher or WebhookDispatcher(timeout=self.settings.timeout_seconds)

    def render_message(
        self,
        trigger: str,
        execution_data: dict[str, Any],
        config: dict[str, Any]
    ) -> str:
        """Render the message for a trigger without sending it."""
        profile = lookup(trigger)
        effective = resolve_config(config, self.overrides)
        return self.renderer.render(profile, effective, trigger, execution_data, config)

    def post_notification(
        self,
        trigger: str,
        execution_data: dict[str, Any],
        config: dict[str, Any]
    ) -> bool:
        """Send a job notification to Slack."""
        profile = lookup(trigger)
        effective = resolve_config(config, self.overrides)
        message = self.renderer.render(profile, effective, trigger, execution_data, config)
        result = self.dispatcher.deliver(effective, message)

        if not result.ok:
            logger.error(
                "Unknown status returned from Slack API: [%s].\n%s",
                result.text,
                encode_payload(message)
            )
            return False

        logger.info("Slack notification sent for trigger '%s'", trigger)
        return True


# Export for dynamic importing
__all__ = ["SlackNotifier"]
