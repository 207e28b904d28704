"""Custom exceptions for the site with HTTP status codes and public messages."""

from enum import Enum
from typing import Any

FORM_ERROR_MESSAGE = "Error parsing form"
SEND_ERROR_MESSAGE = "Error sending email"


class ErrorCode(str, Enum):
    """Error codes used in logs."""

    SITE_ERROR = "SITE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Template errors
    TEMPLATE_LOAD_ERROR = "TEMPLATE_LOAD_ERROR"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"

    # Contact form errors
    FORM_PARSE_ERROR = "FORM_PARSE_ERROR"
    SPAM_DETECTED = "SPAM_DETECTED"

    # Mail errors
    MAIL_SEND_ERROR = "MAIL_SEND_ERROR"
    MAIL_TIMEOUT = "MAIL_TIMEOUT"


class SiteException(Exception):
    """Base exception for site errors.

    ``message`` and ``details`` are for server-side logs. ``public_message``
    is the only text sent back to the requester.
    """

    public_message: str | None = None

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SITE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize site exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    @property
    def response_text(self) -> str:
        """Body returned to the client."""
        return self.public_message if self.public_message is not None else self.message


class TemplateException(SiteException):
    """Template errors. The raw error text is the response body."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_LOAD_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class TemplateLoadException(TemplateException):
    """Template is missing, unreadable or has a syntax error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.TEMPLATE_LOAD_ERROR, details=details)


class TemplateRenderException(TemplateException):
    """Template loaded but failed while executing."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.TEMPLATE_RENDER_ERROR, details=details)


class FormParseException(SiteException):
    """Contact form could not be read.

    Status stays 200: the contact endpoint always answers in plain text.
    """

    public_message = FORM_ERROR_MESSAGE

    def __init__(
        self,
        message: str = "Invalid contact form",
        code: ErrorCode = ErrorCode.FORM_PARSE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, status_code=200, details=details)


class SpamDetectedException(FormParseException):
    """Honeypot field was filled in. Answers exactly like a parse error."""

    def __init__(self, message: str = "Honeypot field was filled", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.SPAM_DETECTED, details=details)


class MailSendException(SiteException):
    """Mail provider rejected the message or could not be reached."""

    public_message = SEND_ERROR_MESSAGE

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.MAIL_SEND_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, status_code=200, details=details)


class MailTimeoutException(MailSendException):
    """Mail provider did not answer before the deadline."""

    def __init__(self, message: str = "Mail provider timed out", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.MAIL_TIMEOUT, details=details)
