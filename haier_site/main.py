"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from haier_site.core.app_factory import create_app
from haier_site.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)

app = create_app()


def run() -> None:
    """Serve the site. Exits if the port cannot be bound."""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
