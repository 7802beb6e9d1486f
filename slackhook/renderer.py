"""
Message template loading and rendering for Slackhook.

Templates are looked up in an operator-editable directory first and in
the templates bundled with this package second, so operators can
replace a built-in template without reinstalling.
"""

from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateNotFound,
)

from slackhook.config import DEFAULT_TEMPLATE_DIR, EffectiveConfig
from slackhook.core import NotificationProfile
from slackhook.errors import TemplateRenderError
from slackhook.logging_config import get_logger

logger = get_logger(__name__)

TEMPLATE_CACHE_SIZE = 250


def build_model(
    trigger: str,
    color: str,
    execution_data: Any,
    config: Any,
    effective: EffectiveConfig
) -> dict[str, Any]:
    """
    Build the data model a message template is rendered against.

    Execution data and the caller configuration are passed through
    untouched. Unset overrides are exposed as empty strings.
    """
    return {
        "trigger": trigger,
        "color": color,
        "executionData": execution_data,
        "config": config,
        "channel_override": effective.channel or "",
        "username_override": effective.username or "",
        "icon_override": effective.icon or "",
    }


class TemplateRenderer:
    """
    Renders Slack message templates with Jinja2.

    Template definitions are cached by name in the Jinja2 environment;
    rendered output is never cached.
    """

    def __init__(
        self,
        template_dir: str | Path | None = DEFAULT_TEMPLATE_DIR,
        cache_size: int = TEMPLATE_CACHE_SIZE
    ) -> None:
        """
        Initialize the renderer.

        Args:
            template_dir: Operator template directory searched before the
                bundled templates (None to use bundled templates only)
            cache_size: Maximum number of template definitions kept in memory
        """
        loaders: list[BaseLoader] = []
        if template_dir:
            loaders.append(FileSystemLoader(str(template_dir)))
        loaders.append(PackageLoader("slackhook", "templates"))

        self.template_dir = template_dir
        self.environment = Environment(
            loader=ChoiceLoader(loaders),
            undefined=StrictUndefined,
            cache_size=cache_size,
            autoescape=False,
        )

    def render(
        self,
        profile: NotificationProfile,
        effective: EffectiveConfig,
        trigger: str,
        execution_data: Any,
        config: Any
    ) -> str:
        """
        Render the message for a trigger.

        Args:
            profile: Template and color bound to the trigger
            effective: Resolved settings (a template override wins)
            trigger: Trigger name
            execution_data: Job execution data from the host
            config: Caller configuration map

        Returns:
            Rendered message text

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        name = effective.template or profile.template
        if name.startswith("_"):
            raise TemplateRenderError(
                f"Template [{name}] is a partial and cannot be used as a message",
                template=name
            )
        model = build_model(trigger, profile.color, execution_data, config, effective)

        try:
            template = self.environment.get_template(name)
            message = template.render(model)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                f"Slack notification message template not found: [{name}]",
                template=name
            ) from e
        except Exception as e:
            raise TemplateRenderError(
                f"Exception loading Slack notification message template: [{e}]",
                template=name
            ) from e

        logger.debug("Rendered template '%s' for trigger '%s'", name, trigger)
        return message

    def list_templates(self) -> list[str]:
        """List template names visible on the search path, without partials."""
        return self.environment.list_templates(filter_func=lambda name: not name.startswith("_"))
