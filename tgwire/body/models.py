"""File attachment and encoded body dataclasses.

WHY: The encoder's inputs and outputs cross the boundary to the transport
layer. Small frozen dataclasses make that contract explicit and keep the
encoder from holding on to anything after it returns.

HOW: FileAttachment names a form field and a local path. EncodedBody
bundles the produced bytes with their content type.

RULES:
- FileAttachment.name is the wire name of the form field
- FileAttachment.filename is the path's base name (directories stripped)
- EncodedBody is created fresh per call and owned by the caller
"""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileAttachment:
    """A local file sent as a multipart file part.

    Attributes:
        name: Wire field name, e.g. ``"photo"``. A record field with the
              same wire name is replaced by this file.
        path: Location of the file contents.
    """

    name: str
    path: str | os.PathLike

    @property
    def filename(self) -> str:
        """Base name of the path, sent as the part's filename."""
        return Path(os.fspath(self.path)).name


@dataclass(frozen=True)
class EncodedBody:
    """An encoded request body ready to hand to an HTTP request.

    Attributes:
        content: The complete body bytes.
        content_type: Value for the Content-Type header. For multipart
                      bodies it carries the ``boundary`` parameter.
    """

    content: bytes
    content_type: str

    def stream(self) -> io.BytesIO:
        """Return a new readable stream positioned at the start of the body."""
        return io.BytesIO(self.content)

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}
