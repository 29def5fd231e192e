"""Configuration constants and .env loading.

WHY: The Bot API base URL, the bot token, and the file copy chunk size
are deployment concerns. Keeping them as module-level values in one
file makes them easy to find and to override per environment.

HOW: python-dotenv loads the .env file on import. Constants read from
os.environ with sensible defaults. Callers read them through the module
(``config.COPY_CHUNK_SIZE``) at call time, so tests can monkeypatch them.

RULES:
- The bot token is loaded from the environment, never hardcoded
- load_bot_token() raises ValueError when the token is missing
- Content-type strings are constants, not environment settings
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Content types
# ---------------------------------------------------------------------------

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"
"""Content type stamped on every file part, whatever the file extension."""

# ---------------------------------------------------------------------------
# Encoder tuning
# ---------------------------------------------------------------------------

COPY_CHUNK_SIZE = int(os.getenv("TGWIRE_COPY_CHUNK_SIZE", "65536"))
"""Bytes read per chunk when copying an attachment into its part."""

# ---------------------------------------------------------------------------
# Bot API
# ---------------------------------------------------------------------------

TELEGRAM_API_BASE_URL = os.getenv("TELEGRAM_API_BASE_URL", "https://api.telegram.org")


def load_bot_token() -> str:
    """Load the bot token from the environment.

    WHY: Every Bot API URL embeds the token. Loading it from the
    environment (via .env) keeps it out of source code.

    HOW: Reads TELEGRAM_BOT_TOKEN from os.environ (populated by python-dotenv).

    RULES:
    - Raises ValueError if the token is missing or blank
    - Never returns a placeholder value
    """
    token = os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
    if not token:
        raise ValueError(
            "Telegram bot token not configured. "
            "Add TELEGRAM_BOT_TOKEN to the .env file or the environment."
        )
    return token
