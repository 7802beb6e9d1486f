"""
Webhook delivery for Slackhook.

Posts a rendered message to a Slack incoming webhook as a form-encoded
`payload` field and returns whatever text the endpoint answered.
"""

from collections.abc import Callable
from urllib.parse import urlencode, urlsplit

import requests
from requests.models import PreparedRequest

from slackhook.config import DEFAULT_TIMEOUT_SECONDS, EffectiveConfig
from slackhook.core import DeliveryResult
from slackhook.errors import DeliveryError, InvalidWebhookURL
from slackhook.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_HEADERS = {
    "charset": "utf-8",
    "Content-Type": "application/x-www-form-urlencoded",
}


def encode_payload(message: str) -> str:
    """Form-encode a message as the single `payload` field (UTF-8)."""
    return urlencode({"payload": message}, encoding="utf-8")


def validate_webhook_url(url: str | None) -> str:
    """
    Check that a webhook URL can be posted to.

    Raises:
        InvalidWebhookURL: If the URL is missing or malformed
    """
    if not url:
        raise InvalidWebhookURL("Slack API URL is not configured.")

    try:
        parts = urlsplit(url)
        PreparedRequest().prepare_url(url, None)
    except (requests.RequestException, ValueError) as e:
        raise InvalidWebhookURL(f"Slack API URL is malformed: [{e}].") from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidWebhookURL(f"Slack API URL is malformed: [{url}].")

    return url


class WebhookDispatcher:
    """
    Sends rendered messages to a webhook with one synchronous POST.

    Each delivery opens its own session and releases the response and
    the session before returning, whatever the outcome.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session_factory: Callable[[], requests.Session] | None = None
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            timeout: Connect and read timeout in seconds
            session_factory: Creates the HTTP session for a delivery
                (defaults to requests.Session)
        """
        self.timeout = timeout
        self._session_factory = session_factory

    def deliver(self, effective: EffectiveConfig, message: str) -> DeliveryResult:
        """
        Post a message to the effective webhook URL.

        Args:
            effective: Resolved settings holding the webhook URL
            message: Rendered message text

        Returns:
            DeliveryResult with the raw response text

        Raises:
            InvalidWebhookURL: If the webhook URL is missing or malformed
            DeliveryError: If the request cannot be sent or the response read
        """
        url = validate_webhook_url(effective.webhook_url)
        body = encode_payload(message).encode("utf-8")

        session_factory = self._session_factory or requests.Session
        session = session_factory()
        response = None
        try:
            try:
                response = session.post(
                    url,
                    data=body,
                    headers=REQUEST_HEADERS,
                    timeout=self.timeout,
                    stream=True
                )
            except requests.RequestException as e:
                raise DeliveryError(f"Error putting data to Slack URL: [{e}].") from e

            text = self._read_response(response)
            logger.debug(
                "Slack webhook answered with HTTP %s (%d characters)",
                response.status_code,
                len(text)
            )
            return DeliveryResult(text=text, status_code=response.status_code)
        finally:
            if response is not None:
                response.close()
            session.close()

    def _read_response(self, response: requests.Response) -> str:
        """Read the whole response body, success or error, as UTF-8 text."""
        try:
            content = response.content
        except requests.RequestException as e:
            raise DeliveryError(f"Error reading Slack API response: [{e}].") from e

        if content is None:
            raise DeliveryError("Error reading Slack API response: [no response body].")

        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeliveryError(f"Error reading Slack API response: [{e}].") from e
