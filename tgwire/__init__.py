"""tgwire — request-body encoding for a Telegram Bot API client.

WHY: Bot API methods accept either a JSON body or a multipart form, and
the choice depends on whether files travel with the request. Every send
method needs the same field naming, omission, and file-override rules,
so they live in one place instead of being repeated per method.

HOW: Two layers — ``tgwire.body`` turns a dataclass record plus file
attachments into an ``EncodedBody`` (bytes + content type), and
``tgwire.api`` wraps that body into an ``httpx.Request`` addressed at a
Bot API method.

RULES:
- The body layer never performs network I/O
- Records are dataclasses whose fields declare wire names via wire_field()
- File attachments always win over a record field with the same wire name
"""

from tgwire.body import (
    EncodedBody,
    EncodingError,
    FileAccessError,
    FileAttachment,
    build_json_body,
    build_multipart_body,
    encode_body,
    wire_field,
)

__version__ = "0.1.0"

__all__ = [
    "EncodedBody",
    "EncodingError",
    "FileAccessError",
    "FileAttachment",
    "build_json_body",
    "build_multipart_body",
    "encode_body",
    "wire_field",
]
