"""
Plugin registry and factory for Slackhook notification plugins.

Hosts look a notification plugin up by provider name and create it from
its instance-level configuration.
"""

from collections.abc import Callable
from typing import Any

from slackhook.core import NotificationPlugin


class PluginRegistry:
    """Mapping of provider names to notification plugin classes."""

    def __init__(self) -> None:
        self._notifiers: dict[str, type[NotificationPlugin]] = {}

    def register_notifier(self, type_name: str, cls: type[NotificationPlugin]) -> None:
        """Register a notification plugin implementation."""
        self._notifiers[type_name] = cls

    def get_notifier(self, type_name: str) -> type[NotificationPlugin]:
        """Get a notification plugin class by provider name."""
        if type_name not in self._notifiers:
            raise ValueError(f"Unknown notifier type: {type_name}")
        return self._notifiers[type_name]

    def list_plugins(self) -> list[str]:
        """List registered provider names."""
        return list(self._notifiers.keys())


# Global registry instance
_registry = PluginRegistry()


def create_notifier(type_name: str, config: dict[str, Any]) -> NotificationPlugin:
    """Create a notification plugin instance from configuration."""
    cls = _registry.get_notifier(type_name)
    return cls(config)


def register_notifier(
    type_name: str
) -> Callable[[type[NotificationPlugin]], type[NotificationPlugin]]:
    """Decorator to register a notification plugin class."""
    def decorator(cls: type[NotificationPlugin]) -> type[NotificationPlugin]:
        _registry.register_notifier(type_name, cls)
        return cls
    return decorator


def get_registry() -> PluginRegistry:
    """Get the global plugin registry."""
    return _registry
