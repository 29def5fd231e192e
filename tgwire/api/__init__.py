"""Bot API glue — method names, message records, and request building.

WHY: The body encoder is generic; this package binds it to the Telegram
Bot API: which methods exist, what their payloads look like, and how an
encoded body becomes an HTTP request.

HOW: MessageType enumerates send methods, messages.py declares payload
records with wire names, and request.py turns a record plus attachments
into an httpx.Request.

RULES:
- Requests are built here but sent by the caller's httpx client
"""

from tgwire.api.methods import MessageType
from tgwire.api.request import (
    build_request,
    method_url,
    set_application_json,
    set_multipart_form_data,
)

__all__ = [
    "MessageType",
    "build_request",
    "method_url",
    "set_application_json",
    "set_multipart_form_data",
]
