"""
Slackhook - Slack incoming-webhook notifications for job lifecycle events.

This package renders a message template for a job trigger (start,
success, failure) and posts it to a Slack incoming webhook.
"""

__version__ = "0.1.0"
