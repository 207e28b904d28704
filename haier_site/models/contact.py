"""Pydantic models for the contact form and outbound mail."""

from pydantic import BaseModel, ConfigDict


class ContactInfo(BaseModel):
    """Fields submitted through the contact form.

    Nothing is validated beyond being plain text; ``honeypot`` is a hidden
    field that people never fill in.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""
    honeypot: str = ""

    @property
    def is_spam(self) -> bool:
        return self.honeypot != ""


class OutboundMessage(BaseModel):
    """Email handed to the mail provider."""

    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    subject: str
    body: str


class MailReceipt(BaseModel):
    """Provider acknowledgement of a queued message."""

    id: str = ""
    message: str = ""
