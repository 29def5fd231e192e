"""Build httpx requests for Bot API methods from encoded bodies.

WHY: Encoding a body is only half of a call; the transport also needs a
method URL and a Content-Type header that matches the body (including
the multipart boundary). Doing this in one helper keeps the header and
the body from drifting apart.

HOW: build_request() encodes the record with encode_body(), then creates
a POST httpx.Request whose content is the encoded bytes and whose
Content-Type comes from the EncodedBody. Optional request setups run
afterwards and may adjust headers.

RULES:
- URLs follow ``{base_url}/bot{token}/{method}``
- The token defaults to config.load_bot_token()
- Requests are built, never sent
- set_multipart_form_data() keeps an existing boundary parameter
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

import httpx

from tgwire import config
from tgwire.api.methods import MessageType
from tgwire.body import FileAttachment, encode_body

logger = logging.getLogger(__name__)

RequestSetup = Callable[[httpx.Request], None]


# ---------------------------------------------------------------------------
# Request setups
# ---------------------------------------------------------------------------


def set_application_json(request: httpx.Request) -> None:
    """Set the request's Content-Type to application/json."""
    request.headers["Content-Type"] = config.JSON_CONTENT_TYPE


def set_multipart_form_data(request: httpx.Request) -> None:
    """Mark the request as multipart/form-data.

    A Content-Type that already names multipart/form-data is left alone,
    since replacing it would drop the boundary the body was written with.
    """
    current = request.headers.get("Content-Type", "")
    if not current.startswith(config.MULTIPART_CONTENT_TYPE):
        request.headers["Content-Type"] = config.MULTIPART_CONTENT_TYPE


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------


def method_url(
    method: MessageType | str,
    token: str | None = None,
    base_url: str | None = None,
) -> str:
    """Return the full URL of a Bot API method."""
    name = _method_name(method)
    base = (base_url or config.TELEGRAM_API_BASE_URL).rstrip("/")
    return f"{base}/bot{token or config.load_bot_token()}/{name}"


def build_request(
    method: MessageType | str,
    record: Any,
    *attachments: FileAttachment,
    token: str | None = None,
    base_url: str | None = None,
    setups: Iterable[RequestSetup] = (),
) -> httpx.Request:
    """Encode ``record`` and wrap it in a POST request for ``method``.

    Args:
        method: Bot API method, e.g. ``MessageType.PHOTO``.
        record: The message record to send.
        *attachments: Files to upload; their presence selects multipart.
        token: Bot token; defaults to the configured one.
        base_url: API root; defaults to TELEGRAM_API_BASE_URL.
        setups: Callables applied to the request after it is built.

    Returns:
        An unsent httpx.Request.

    Raises:
        EncodingError, FileAccessError: From body encoding.
        ValueError: If no token is given and none is configured.
    """
    url = method_url(method, token=token, base_url=base_url)
    body = encode_body(record, *attachments)
    request = httpx.Request("POST", url, content=body.content, headers=body.headers)
    for setup in setups:
        setup(request)
    logger.debug(
        "Built %s request (%s, %d bytes)",
        _method_name(method),
        request.headers["Content-Type"],
        len(body.content),
    )
    return request


def _method_name(method: MessageType | str) -> str:
    return method.value if isinstance(method, MessageType) else method
