"""
Job triggers and the notification profile bound to each of them.
"""

from collections.abc import Mapping
from types import MappingProxyType

from slackhook.core import NotificationProfile
from slackhook.errors import UnknownTrigger

TRIGGER_START = "start"
TRIGGER_SUCCESS = "success"
TRIGGER_FAILURE = "failure"

COLOR_GREEN = "good"
COLOR_YELLOW = "warning"
COLOR_RED = "danger"

TEMPLATE_STARTED = "slack-template-started.j2"
TEMPLATE_SUCCESS = "slack-template-success.j2"
TEMPLATE_FAILED = "slack-template-error.j2"

TRIGGER_PROFILES: Mapping[str, NotificationProfile] = MappingProxyType({
    TRIGGER_START: NotificationProfile(template=TEMPLATE_STARTED, color=COLOR_YELLOW),
    TRIGGER_SUCCESS: NotificationProfile(template=TEMPLATE_SUCCESS, color=COLOR_GREEN),
    TRIGGER_FAILURE: NotificationProfile(template=TEMPLATE_FAILED, color=COLOR_RED),
})


def lookup(trigger: str) -> NotificationProfile:
    """
    Get the notification profile for a trigger.

    Raises:
        UnknownTrigger: If the trigger is not registered
    """
    try:
        return TRIGGER_PROFILES[trigger]
    except (KeyError, TypeError):
        raise UnknownTrigger(trigger) from None


def list_triggers() -> list[str]:
    """List registered trigger names."""
    return list(TRIGGER_PROFILES.keys())
