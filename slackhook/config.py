"""
Configuration loading, validation and override resolution for Slackhook.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_TEMPLATE_DIR = "/etc/slackhook"
DEFAULT_TIMEOUT_SECONDS = 10.0


def _text(value: Any) -> str | None:
    """
    Coerce a host configuration value to text.

    Only None is treated as absent here. Other non-string values, False
    and 0 included, are converted with str(), so YAML `slack_channel: 0`
    becomes "0". An empty string never wins over the other layer.
    """
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _pick(override: str | None, default: str | None) -> str | None:
    """Return the override unless it is absent or empty."""
    if override:
        return override
    return default


class SlackSettings(BaseModel):
    """
    One layer of Slack settings.

    The project layer and the instance layer share this shape so they
    can be merged field by field.
    """
    model_config = ConfigDict(frozen=True)

    webhook_url: str | None = None
    template: str | None = None
    channel: str | None = None
    username: str | None = None
    icon: str | None = None

    @classmethod
    def from_project(cls, config: Mapping[str, Any]) -> "SlackSettings":
        """Read project-scope defaults from the host's configuration map."""
        return cls(
            webhook_url=_text(config.get("webhook_url")),
            template=_text(config.get("slack_template")),
            channel=_text(config.get("slack_channel")),
            username=_text(config.get("slack_username")),
            icon=_text(config.get("slack_icon")),
        )


class EffectiveConfig(BaseModel):
    """Settings in force for a single notification."""
    model_config = ConfigDict(frozen=True)

    webhook_url: str | None = None
    template: str | None = None
    channel: str | None = None
    username: str | None = None
    icon: str | None = None


class NotifierSettings(BaseModel):
    """Instance-level settings of a Slack notifier."""
    model_config = ConfigDict(extra="forbid")

    webhook_url_override: str | None = None
    slack_template: str | None = None
    slack_channel_override: str | None = None
    slack_username_override: str | None = None
    slack_icon_override: str | None = None
    template_dir: str | None = DEFAULT_TEMPLATE_DIR  # Operator templates, searched first
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    def overrides(self) -> SlackSettings:
        """Instance overrides as a settings layer."""
        return SlackSettings(
            webhook_url=self.webhook_url_override,
            template=self.slack_template,
            channel=self.slack_channel_override,
            username=self.slack_username_override,
            icon=self.slack_icon_override,
        )


class PluginConfig(BaseModel):
    """Settings file consumed by the command line interface."""
    type: str = "slack"  # Notification plugin provider name
    project: dict[str, Any] = Field(default_factory=dict)  # Passed to plugins as `config`
    notifier: NotifierSettings = Field(default_factory=NotifierSettings)
    log_level: str = "INFO"
    log_file: str | None = None


def resolve_config(
    project_config: Mapping[str, Any] | SlackSettings,
    overrides: SlackSettings
) -> EffectiveConfig:
    """
    Merge instance overrides over project defaults.

    Each field is resolved independently: a present, non-empty override
    wins, otherwise the project default applies.

    Args:
        project_config: Host configuration map or an already parsed layer
        overrides: Instance-level overrides

    Returns:
        EffectiveConfig for one notification
    """
    if isinstance(project_config, SlackSettings):
        defaults = project_config
    else:
        defaults = SlackSettings.from_project(project_config or {})

    return EffectiveConfig(
        webhook_url=_pick(overrides.webhook_url, defaults.webhook_url),
        template=_pick(overrides.template, defaults.template),
        channel=_pick(overrides.channel, defaults.channel),
        username=_pick(overrides.username, defaults.username),
        icon=_pick(overrides.icon, defaults.icon),
    )


def load_config(config_path: str | Path) -> PluginConfig:
    """
    Load and validate a settings file.

    Args:
        config_path: Path to the YAML settings file

    Returns:
        Validated PluginConfig object

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If the settings are invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with path.open('r', encoding='utf-8') as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    try:
        return PluginConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e
