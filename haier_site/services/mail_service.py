"""Mailgun service for delivering contact form mail."""

from typing import Protocol

import httpx

from haier_site.config import Settings
from haier_site.exceptions import MailSendException, MailTimeoutException
from haier_site.models.contact import MailReceipt, OutboundMessage


class MailSender(Protocol):
    """Anything that can deliver an OutboundMessage."""

    async def send(self, message: OutboundMessage) -> MailReceipt:
        """Deliver a message.

        Raises:
            MailSendException: If the provider rejects the message or is unreachable
        """
        ...


class MailgunMailer:
    """Sends messages through the Mailgun HTTP API."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        """
        Args:
            client: Shared HTTP client from the app lifespan.
            settings: Mailgun domain, key, API base and timeout.
        """
        self._client = client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        return f"{self._settings.mailgun_api_base}/{self._settings.mg_domain}/messages"

    async def send(self, message: OutboundMessage) -> MailReceipt:
        """
        Post a message to Mailgun.

        Args:
            message: Message to deliver.

        Returns:
            Mailgun id and response text.

        Raises:
            MailTimeoutException: If Mailgun does not answer in time.
            MailSendException: On any other HTTP or decoding failure.
        """
        try:
            response = await self._client.post(
                self.endpoint,
                auth=("api", self._settings.mg_api_key),
                data={
                    "from": message.sender,
                    "to": message.recipient,
                    "subject": message.subject,
                    "text": message.body,
                },
                timeout=self._settings.mail_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MailSendException(
                f"Mailgun request failed: {e.response.status_code}",
                details={
                    "domain": self._settings.mg_domain,
                    "status_code": e.response.status_code,
                    "provider_response": e.response.text[:200],
                },
            ) from e
        except httpx.TimeoutException as e:
            raise MailTimeoutException(
                f"Mailgun request timed out: {str(e)}",
                details={"domain": self._settings.mg_domain},
            ) from e
        except httpx.HTTPError as e:
            raise MailSendException(
                f"Mailgun request failed: {str(e)}",
                details={"domain": self._settings.mg_domain, "error_type": "network_error"},
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise MailSendException(
                "Mailgun returned an unreadable response",
                details={"provider_response": response.text[:200]},
            ) from e

        return MailReceipt(id=str(payload.get("id", "")), message=str(payload.get("message", "")))
