"""Discord webhook delivery."""

import logging
import requests

from .exceptions import ConfigurationError, DeliveryError

# Seconds before the webhook request is abandoned
DELIVERY_TIMEOUT = 10


class DiscordWebhookClient:
    """Posts notification content to a Discord webhook."""

    def __init__(self, webhook_url: str, timeout: float = DELIVERY_TIMEOUT):
        if not webhook_url:
            raise ConfigurationError("Discord webhook URL is required", missing=['DISCORD_WEBHOOK'])
        self.webhook_url = webhook_url
        self.timeout = timeout

    def build_payload(self, content: str) -> dict:
        # Only explicit user mentions may notify; no role or @everyone pings
        return {
            'content': content,
            'allowed_mentions': {'parse': ['users']}
        }

    def send(self, content: str) -> None:
        """Send one message. Failures are logged and raised, never retried.

        Raises:
            DeliveryError: On a non-success status or a network error
        """
        try:
            response = requests.post(self.webhook_url, json=self.build_payload(content), timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"Error sending Discord message: {e}")
            raise DeliveryError(f"Discord message delivery failed: {e}") from e

        if not response.ok:
            logging.error(f"Discord message delivery failed with status {response.status_code}")
            logging.error(f"Response body: {response.text}")
            raise DeliveryError(
                f"Discord message delivery failed: {response.status_code}",
                status_code=response.status_code,
                body=response.text
            )

        logging.info(f"Discord message sent (status {response.status_code})")
