"""Shared test fixtures for the tgwire test suite.

WHY: Multipart assertions need the body split back into parts, and
several test modules use the same small records and attachment files.
Centralizing them here keeps the tests focused on behaviour.

HOW: Records used across modules live in records.py.
The parse_parts fixture decodes an EncodedBody with requests-toolbelt's
MultipartDecoder into simple FormPart tuples.

RULES:
- File fixtures live under tmp_path
- Boundaries are not asserted on unless a test sets one explicitly
"""

from __future__ import annotations

import re
from typing import NamedTuple

import pytest
from requests_toolbelt.multipart.decoder import MultipartDecoder

from tgwire.body import EncodedBody


# ---------------------------------------------------------------------------
# Multipart decoding
# ---------------------------------------------------------------------------


class FormPart(NamedTuple):
    name: str
    filename: str | None
    content: bytes
    content_type: str | None


_DISPOSITION_RE = re.compile(r'name="(?P<name>[^"]*)"(?:; filename="(?P<filename>[^"]*)")?')


def _decode(body: EncodedBody) -> list[FormPart]:
    decoder = MultipartDecoder(body.content, body.content_type)
    parts = []
    for part in decoder.parts:
        disposition = part.headers[b"Content-Disposition"].decode("utf-8")
        match = _DISPOSITION_RE.search(disposition)
        assert match is not None, disposition
        content_type = part.headers.get(b"Content-Type")
        parts.append(
            FormPart(
                name=match.group("name"),
                filename=match.group("filename"),
                content=part.content,
                content_type=content_type.decode("ascii") if content_type else None,
            )
        )
    return parts


@pytest.fixture
def parse_parts():
    """Return a function that decodes a multipart EncodedBody into FormParts."""
    return _decode


# ---------------------------------------------------------------------------
# Attachment files
# ---------------------------------------------------------------------------


@pytest.fixture
def photo_file(tmp_path):
    """A small fake JPEG at tmp_path/a.jpg."""
    path = tmp_path / "a.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake jpeg bytes\xff\xd9")
    return path


@pytest.fixture
def document_file(tmp_path):
    """A text document in a nested directory."""
    directory = tmp_path / "docs" / "2024"
    directory.mkdir(parents=True)
    path = directory / "report.txt"
    path.write_text("quarterly report\n", encoding="utf-8")
    return path
