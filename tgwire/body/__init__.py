"""Request body encoding — records and file attachments to HTTP bodies.

WHY: A Bot API call carries either a JSON body or, when files are
uploaded, a multipart form. Callers should not have to pick; they hand
over a record and any attachments and get back bytes plus a content type.

HOW: encode_body() dispatches to build_multipart_body() when at least
one attachment is given and to build_json_body() otherwise. Both return
an EncodedBody.

RULES:
- All encoding goes through this package (no ad-hoc json.dumps elsewhere)
- Errors are EncodingError or FileAccessError, both BodyError subclasses
"""

from __future__ import annotations

from typing import Any

from tgwire.body.errors import BodyError, EncodingError, FileAccessError
from tgwire.body.fields import first_non_zero, is_zero, wire_field
from tgwire.body.json_body import build_json_body
from tgwire.body.models import EncodedBody, FileAttachment
from tgwire.body.multipart import build_multipart_body


def encode_body(record: Any, *attachments: FileAttachment) -> EncodedBody:
    """Encode ``record`` as multipart when files are attached, JSON otherwise."""
    if attachments:
        return build_multipart_body(record, *attachments)
    return build_json_body(record)


__all__ = [
    "BodyError",
    "EncodedBody",
    "EncodingError",
    "FileAccessError",
    "FileAttachment",
    "build_json_body",
    "build_multipart_body",
    "encode_body",
    "first_non_zero",
    "is_zero",
    "wire_field",
]
