"""JSON request body builder.

WHY: Bot API methods without file uploads take a plain JSON body. This
is the path encode_body() takes when no attachment is present.

HOW: Converts the record with fields.dumps(), which applies wire names
and omit-if-empty markers recursively, and encodes the text as UTF-8.

RULES:
- Content type is always application/json
- Unserializable values raise EncodingError, never a partial body
"""

from __future__ import annotations

import logging
from typing import Any

from tgwire import config
from tgwire.body.fields import dumps
from tgwire.body.models import EncodedBody

logger = logging.getLogger(__name__)


def build_json_body(record: Any) -> EncodedBody:
    """Serialize ``record`` to a JSON request body.

    Args:
        record: A dataclass record, a mapping, or any JSON-representable
                value.

    Returns:
        EncodedBody with UTF-8 JSON content and ``application/json``.

    Raises:
        EncodingError: If the record contains a value with no JSON form
            (a function, a set, a cyclic structure, NaN, ...).
    """
    content = dumps(record).encode("utf-8")
    logger.debug("Encoded JSON body for %s (%d bytes)", type(record).__name__, len(content))
    return EncodedBody(content=content, content_type=config.JSON_CONTENT_TYPE)
