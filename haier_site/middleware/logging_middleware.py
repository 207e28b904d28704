"""Redaction of secrets before URLs are logged."""

import re

# Query parameters whose values never reach the logs
SENSITIVE_PARAMS = [
    "api_key",
    "apikey",
    "key",
    "token",
    "password",
    "secret",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters and userinfo credentials from a URL."""
    redacted = re.sub(r"://[^/@\s]+@", "://***REDACTED***@", url)
    for param in SENSITIVE_PARAMS:
        pattern = rf"([?&]{param})=([^&\s\"]+)"
        redacted = re.sub(pattern, r"\1=***REDACTED***", redacted, flags=re.IGNORECASE)
    return redacted
