"""Exceptions raised while encoding a request body.

WHY: The transport layer must tell "this record can't be serialized"
apart from "this attachment can't be read" to decide whether to fix the
payload or report a missing file to the user.

HOW: Both errors share BodyError as a base so callers can catch either
with one clause. Each keeps the context needed to report it (field name,
file path) and the original exception is chained via ``raise ... from``.

RULES:
- Encoding never retries and never returns a partial body
- FileAccessError always carries the offending path
"""

from __future__ import annotations


class BodyError(Exception):
    """Base class for request body encoding failures."""


class EncodingError(BodyError):
    """Raised when a record, or one of its fields, cannot be serialized.

    Attributes:
        message: What could not be encoded and why.
        field: Wire name of the failing field, when the failure is tied
               to one field of a multipart body; otherwise None.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        if self.field:
            return f"cannot encode field {self.field!r}: {self.message}"
        return self.message


class FileAccessError(BodyError):
    """Raised when an attachment cannot be opened or read.

    Attributes:
        path: Filesystem path of the attachment.
        name: Wire name of the attachment.
        reason: Short description of the underlying OS error.
    """

    def __init__(self, path: str, name: str, reason: str) -> None:
        self.path = path
        self.name = name
        self.reason = reason
        super().__init__(f"cannot read attachment {name!r} from {path}: {reason}")
