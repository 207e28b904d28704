from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # project root
PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_SENDER = "Contact Form <noreply@haiertherealtor.com>"


class Settings(BaseSettings):
    """Application settings, read once at startup.

    Mailgun credentials and the contact recipient are required and will raise
    validation errors if missing. Everything else has a working default.

    The instance is frozen: handlers receive it through dependency injection
    and never mutate it.
    """

    # Server
    host: str = Field(default="0.0.0.0", min_length=1, description="Bind address")
    port: int = Field(default=8080, ge=1, le=65535, description="Listening port")

    # Mailgun - required for the contact form
    mg_domain: str = Field(min_length=1, description="Mailgun sending domain")
    mg_api_key: str = Field(min_length=1, description="Mailgun API key")
    mailgun_api_base: str = Field(
        default="https://api.mailgun.net/v3",
        pattern=r"^https?://",
        description="Mailgun API base URL (https://api.eu.mailgun.net/v3 for EU accounts)",
    )
    mail_timeout_seconds: float = Field(default=10.0, gt=0, description="Deadline for one send")

    # Contact form addresses
    recipient_email: str = Field(min_length=1, description="Where contact messages are delivered")
    sender_email: str = Field(default=DEFAULT_SENDER, min_length=1, description="From header of contact mail")

    # Templates and static assets
    templates_dir: Path = Field(default=PACKAGE_DIR / "templates", description="Template root")
    static_dir: Path = Field(default=PACKAGE_DIR / "static", description="Static asset root")
    layout_template: str = Field(default="layout.html", min_length=1, description="Layout template identifier")
    template_cache: bool = Field(default=False, description="Cache parsed templates until restart")

    # Rate limiting for the contact form
    rate_limit_enabled: bool = Field(default=True, description="Enable per-IP rate limiting")
    contact_rate_limit: str = Field(default="10/minute", description="slowapi limit for /contact")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        validate_default=True,
    )

    @field_validator("mg_domain", "mg_api_key", "recipient_email", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values that are only whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("value must not be empty")
        return v

    @field_validator("mailgun_api_base", mode="after")
    @classmethod
    def validate_mailgun_api_base(cls, v: str) -> str:
        """Drop a trailing slash so endpoint paths join cleanly."""
        return v.rstrip("/")


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide Settings instance.

    Created on first use so the .env file is read once. The app factory
    passes the instance into ``app.state.settings`` for handlers.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
