"""Contact form pipeline: parse, filter bots, relay to the mail provider."""

import asyncio
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from haier_site.config import Settings
from haier_site.exceptions import FormParseException, MailSendException, MailTimeoutException, SpamDetectedException
from haier_site.logging_config import get_logger, log_with_context
from haier_site.models.contact import ContactInfo, MailReceipt, OutboundMessage
from haier_site.services.mail_service import MailSender

logger = get_logger(__name__)

CONTACT_SUBJECT = "New Contact!"
THANK_YOU_MESSAGE = "Thank you for reaching out! I will get back to you soon."

CONTACT_FIELDS = ("name", "email", "phone", "message", "honeypot")


def parse_contact_info(values: Mapping[str, Any]) -> ContactInfo:
    """
    Build ContactInfo from submitted form values.

    Missing fields are empty strings. A field that is not plain text
    (e.g. a file upload) makes the whole form invalid.

    Raises:
        FormParseException: If a field cannot be read as text.
    """
    fields = {key: values[key] for key in CONTACT_FIELDS if key in values}
    try:
        return ContactInfo.model_validate(fields)
    except ValidationError as e:
        raise FormParseException(
            "Contact form has non-text fields",
            details={"fields": sorted(str(err["loc"][0]) for err in e.errors() if err["loc"])},
        ) from e


def build_outbound_message(info: ContactInfo, settings: Settings) -> OutboundMessage:
    """Format the notification mail for a contact submission."""
    body = f"New Message from {info.name}\n{info.email}\n{info.phone}\n\n{info.message}"
    return OutboundMessage(
        sender=settings.sender_email,
        recipient=settings.recipient_email,
        subject=CONTACT_SUBJECT,
        body=body,
    )


async def submit_contact(info: ContactInfo, mailer: MailSender, settings: Settings) -> MailReceipt:
    """
    Relay a contact submission to the mail provider.

    The send is bounded by ``settings.mail_timeout_seconds``; when the
    deadline passes the send is cancelled and nothing is retried.

    Args:
        info: Parsed form values.
        mailer: Mail provider.
        settings: Addresses and deadline.

    Returns:
        Provider receipt.

    Raises:
        SpamDetectedException: If the honeypot field is filled in.
        MailTimeoutException: If the provider misses the deadline.
        MailSendException: If the provider fails.
    """
    if info.is_spam:
        log_with_context(
            logger,
            "warning",
            "Contact submission rejected by honeypot",
            honeypot_length=len(info.honeypot),
            event_type="contact_spam_detected",
        )
        raise SpamDetectedException()

    message = build_outbound_message(info, settings)

    try:
        receipt = await asyncio.wait_for(mailer.send(message), timeout=settings.mail_timeout_seconds)
    except TimeoutError as e:
        raise MailTimeoutException(
            f"Mail provider did not answer within {settings.mail_timeout_seconds}s",
            details={"timeout_seconds": settings.mail_timeout_seconds},
        ) from e
    except MailSendException:
        raise
    except Exception as e:
        # Unknown provider errors are send failures
        raise MailSendException(
            f"Failed to send contact email: {str(e)}",
            details={"error_type": type(e).__name__},
        ) from e

    log_with_context(
        logger,
        "info",
        "Contact email sent",
        message_id=receipt.id,
        provider_response=receipt.message,
        event_type="contact_email_sent",
    )
    return receipt
