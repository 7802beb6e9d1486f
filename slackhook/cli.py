"""
Slackhook CLI - Command line interface for operating the Slack notifier.

Provides commands for:
- Configuration validation
- Listing templates on the search path
- Previewing a rendered message
- Sending a test notification
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from slackhook import notifiers  # noqa: F401  (registers notification plugins)
from slackhook.config import PluginConfig, load_config
from slackhook.errors import SlackNotificationError
from slackhook.logging_config import get_logger, setup_logging
from slackhook.registry import create_notifier
from slackhook.renderer import TemplateRenderer
from slackhook.triggers import list_triggers

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> PluginConfig | None:
    config_path = Path(args.config)

    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return None

    try:
        return load_config(config_path)
    except Exception as e:
        print(f"✗ Configuration invalid: {e}", file=sys.stderr)
        return None


def _execution_data(args: argparse.Namespace) -> dict[str, Any]:
    """Build execution data from --data and --job."""
    data: dict[str, Any] = {}
    if args.data:
        with Path(args.data).open('r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("Execution data file must contain a JSON object")
    if args.job:
        data["job"] = {"name": args.job}
    return data


def cmd_config_validate(args: argparse.Namespace) -> int:
    """Validate configuration file."""
    config = _load(args)
    if config is None:
        return 1

    has_webhook = bool(config.project.get("webhook_url") or config.notifier.webhook_url_override)

    print(f"✓ Configuration valid: {args.config}")
    print(f"  - Notifier type: {config.type}")
    print(f"  - Webhook URL configured: {'yes' if has_webhook else 'no'}")
    print(f"  - Template directory: {config.notifier.template_dir or '(bundled only)'}")
    return 0


def cmd_templates_list(args: argparse.Namespace) -> int:
    """List templates visible on the search path."""
    config = _load(args)
    if config is None:
        return 1

    renderer = TemplateRenderer(config.notifier.template_dir)
    templates = renderer.list_templates()
    print(f"Available templates ({len(templates)}):\n")
    for name in templates:
        print(f"  {name}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Print the rendered message for a trigger without sending it."""
    config = _load(args)
    if config is None:
        return 1

    try:
        notifier = create_notifier(config.type, config.notifier.model_dump())
        message = notifier.render_message(args.trigger, _execution_data(args), config.project)
    except (SlackNotificationError, OSError, ValueError) as e:
        print(f"✗ Error rendering message: {e}", file=sys.stderr)
        return 1

    print(message)
    return 0


def cmd_notify(args: argparse.Namespace) -> int:
    """Send a notification for a trigger."""
    config = _load(args)
    if config is None:
        return 1

    setup_logging(config.log_level, config.log_file)

    try:
        notifier = create_notifier(config.type, config.notifier.model_dump())
        print(f"Sending '{args.trigger}' notification via {config.type}")
        success = notifier.post_notification(args.trigger, _execution_data(args), config.project)
    except (SlackNotificationError, OSError, ValueError) as e:
        logger.error("Notification failed: %s", e)
        print(f"✗ Error sending notification: {e}", file=sys.stderr)
        return 1

    if success:
        print("✓ Notification delivered")
        return 0
    print("✗ Notification rejected by remote service", file=sys.stderr)
    return 1


def _add_message_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("trigger", choices=list_triggers(), help="Job event to notify about")
    parser.add_argument(
        "-d", "--data",
        help="JSON file with execution data passed to the template"
    )
    parser.add_argument(
        "-j", "--job",
        help="Job name (sets executionData.job.name)"
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="slackhook",
        description="Slackhook - Slack notifications for job lifecycle events"
    )
    parser.add_argument(
        "-c", "--config",
        default="slackhook.yaml",
        help="Path to configuration file (default: slackhook.yaml)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Config commands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="subcommand")
    config_subparsers.add_parser("validate", help="Validate configuration file")

    # Template commands
    templates_parser = subparsers.add_parser("templates", help="Template management")
    templates_subparsers = templates_parser.add_subparsers(dest="subcommand")
    templates_subparsers.add_parser("list", help="List templates on the search path")

    render_parser = subparsers.add_parser("render", help="Preview a rendered message")
    _add_message_arguments(render_parser)

    notify_parser = subparsers.add_parser("notify", help="Send a notification")
    _add_message_arguments(notify_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        if args.subcommand == "validate":
            return cmd_config_validate(args)
        parser.print_help()
        return 0

    if args.command == "templates":
        if args.subcommand == "list":
            return cmd_templates_list(args)
        parser.print_help()
        return 0

    if args.command == "render":
        return cmd_render(args)

    if args.command == "notify":
        return cmd_notify(args)

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
