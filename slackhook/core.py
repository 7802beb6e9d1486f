"""
Core interfaces and data structures for Slackhook.

This module defines the contract a host job-execution system calls into
and the small value types that flow through the notification pipeline:
- NotificationProfile: template and color bound to a trigger
- DeliveryResult: what the webhook endpoint answered
- NotificationPlugin: the host-facing entry point
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

SLACK_OK_RESPONSE = "ok"


@dataclass(frozen=True)
class NotificationProfile:
    """Default template and attachment color for a trigger."""
    template: str
    color: str  # Slack attachment color: "good", "warning", "danger"


@dataclass(frozen=True)
class DeliveryResult:
    """Raw response from the webhook endpoint."""
    text: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        """True only when the endpoint answered with the literal text "ok"."""
        return self.text == SLACK_OK_RESPONSE


class NotificationPlugin(ABC):
    """
    Base class for notification plugins.

    The host invokes a plugin once per job lifecycle event.
    """

    def __init__(self, config: dict[str, Any]):
        """
        Initialize the plugin with its instance-level configuration.

        Args:
            config: Plugin instance settings
        """
        self.config = config

    @abstractmethod
    def post_notification(
        self,
        trigger: str,
        execution_data: dict[str, Any],
        config: dict[str, Any]
    ) -> bool:
        """
        Send a notification for a job lifecycle event.

        Args:
            trigger: Name of the event ("start", "success", "failure")
            execution_data: Job execution data supplied by the host
            config: Project-scope configuration supplied by the host

        Returns:
            True if the remote service accepted the notification, False otherwise
        """
        raise NotImplementedError
