"""Multipart form-data request body builder.

WHY: Bot API methods that upload files (sendPhoto, sendDocument, ...)
need a multipart/form-data body in which record fields become text parts
and local files become file parts. A file and a record field may share a
wire name (``photo`` as a file_id string vs. an uploaded file); the
upload must win.

HOW: Two passes over a requests-toolbelt MultipartEncoder field list.
The field pass walks the record in declaration order and applies the
skip rules; the file pass copies each attachment into an in-memory part
while its handle is open. The encoder then renders the whole body,
closing boundary included.

RULES:
- Skip order is fixed: attachment override first, then omit-if-empty
- Composite values (records, mappings, lists) are embedded as JSON text
- Each file handle is closed before the next attachment is opened
- File parts are named by the attachment, with the path's base name as
  filename and application/octet-stream as content type
- Any failure aborts the whole build; no partial body is returned
"""

from __future__ import annotations

import io
import logging
import os
import shutil
from typing import Any

from requests_toolbelt import MultipartEncoder

from tgwire import config
from tgwire.body.errors import EncodingError, FileAccessError
from tgwire.body.fields import encode_field_value, is_zero, iter_wire_fields
from tgwire.body.models import EncodedBody, FileAttachment

logger = logging.getLogger(__name__)


def build_multipart_body(
    record: Any,
    *attachments: FileAttachment,
    boundary: str | None = None,
) -> EncodedBody:
    """Encode ``record`` and ``attachments`` as a multipart/form-data body.

    Args:
        record: A dataclass record or a mapping of wire name to value.
        *attachments: Files to upload, in the order they should appear.
        boundary: Boundary token to use instead of a random one.

    Returns:
        EncodedBody whose content_type carries the boundary parameter.

    Raises:
        EncodingError: If a field value cannot be serialized, or the
            body cannot be finalized.
        FileAccessError: If an attachment cannot be opened or read.
    """
    file_names = {attachment.name for attachment in attachments}
    parts: list[tuple[str, Any]] = []

    # Field pass
    for wire in iter_wire_fields(record):
        if wire.name in file_names:
            logger.debug("Field %r replaced by attachment", wire.name)
            continue
        if wire.omit_empty and is_zero(wire.value):
            continue
        try:
            value = encode_field_value(wire.value)
        except EncodingError as exc:
            exc.field = wire.name
            raise
        parts.append((wire.name, value))

    field_count = len(parts)

    # File pass
    for attachment in attachments:
        content = _copy_attachment(attachment)
        parts.append(
            (attachment.name, (attachment.filename, content, config.DEFAULT_FILE_CONTENT_TYPE))
        )

    try:
        encoder = MultipartEncoder(fields=parts, boundary=boundary)
        body = encoder.to_string()
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to finalize multipart body: {exc}") from exc

    logger.debug(
        "Encoded multipart body: %d fields, %d files, %d bytes",
        field_count,
        len(attachments),
        len(body),
    )
    return EncodedBody(content=body, content_type=encoder.content_type)


def _copy_attachment(attachment: FileAttachment) -> io.BytesIO:
    """Copy an attachment's contents into a fresh in-memory part.

    The file is opened, copied in COPY_CHUNK_SIZE chunks, and closed
    before returning, on success and on failure alike.
    """
    path = os.fspath(attachment.path)
    part = io.BytesIO()
    try:
        with open(path, "rb") as handle:
            shutil.copyfileobj(handle, part, config.COPY_CHUNK_SIZE)
    except OSError as exc:
        raise FileAccessError(str(path), attachment.name, exc.strerror or str(exc)) from exc
    part.seek(0)
    return part
