"""Encode submitted pairs and files into a request body.

Two encodings are supported, chosen by the form's enctype:
``multipart/form-data`` and, for any other value,
``application/x-www-form-urlencoded``.

Example:
    >>> payload = encode_payload([("q", "a b")], [], URLENCODED)
    >>> payload.body
    b'q=a%20b'
"""

from __future__ import annotations

import random
import string
from typing import Iterable
from urllib.parse import quote, urlencode

from anystore.logging import get_logger
from pydantic import BaseModel

from webform.core import get_settings
from webform.model.fields import FileUpload, Pair
from webform.settings import MULTIPART, URLENCODED

log = get_logger(__name__)

CRLF = b"\r\n"
BOUNDARY_CHARS = string.ascii_letters


class Payload(BaseModel):
    """An encoded request body with its content type."""

    body: bytes
    content_type: str
    boundary: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}


def is_multipart(enctype: str | None) -> bool:
    if not enctype:
        return False
    media_type = enctype.split(";", 1)[0]
    return media_type.strip().lower() == MULTIPART


def random_boundary(length: int | None = None) -> str:
    """Make a random multipart boundary of ASCII letters."""
    if length is None:
        length = get_settings().boundary_length
    return "".join(random.choice(BOUNDARY_CHARS) for _ in range(length))


def mime_value_quote(value: str) -> str:
    """Backslash-escape quotes, backslashes and CR for a quoted header value."""
    for char in ("\\", '"', "\r"):
        value = value.replace(char, "\\" + char)
    return value


def urlencode_pairs(pairs: Iterable[Pair], charset: str | None = None) -> str:
    """Percent-encode pairs as ``name=value`` joined by ``&``."""
    if charset is None:
        charset = get_settings().charset
    return urlencode(list(pairs), encoding=charset, quote_via=quote)


def _disposition(name: str, file_name: str | None = None) -> str:
    header = f'Content-Disposition: form-data; name="{mime_value_quote(name)}"'
    if file_name is not None:
        header += f'; filename="{mime_value_quote(file_name)}"'
    return header


def param_to_multipart(name: str, value: str, charset: str) -> bytes:
    head = _disposition(name) + "\r\n\r\n"
    return head.encode(charset) + value.encode(charset) + CRLF


def file_to_multipart(upload: FileUpload, charset: str) -> bytes:
    head = _disposition(upload.name, upload.file_name) + "\r\n"
    head += "Content-Transfer-Encoding: binary\r\n"
    if upload.mime_type is not None:
        head += f"Content-Type: {upload.mime_type}\r\n"
    head += "\r\n"
    return head.encode(charset) + upload.file_data + CRLF


def encode_multipart(
    pairs: Iterable[Pair],
    file_uploads: Iterable[FileUpload],
    boundary: str | None = None,
    charset: str | None = None,
) -> Payload:
    """Encode pairs and file uploads as ``multipart/form-data``.

    Every part is preceded by ``--boundary`` and the body is closed by
    ``--boundary--``, all lines ending in CRLF.
    """
    if boundary is None:
        boundary = random_boundary()
    if charset is None:
        charset = get_settings().charset
    parts = [param_to_multipart(name, value, charset) for name, value in pairs]
    parts.extend(file_to_multipart(upload, charset) for upload in file_uploads)
    delimiter = f"--{boundary}".encode("ascii")
    body = b"".join(delimiter + CRLF + part for part in parts)
    body += delimiter + b"--" + CRLF
    log.debug("Encoded multipart body", parts=len(parts), size=len(body))
    return Payload(
        body=body,
        content_type=f"{MULTIPART}; boundary={boundary}",
        boundary=boundary,
    )


def encode_payload(
    pairs: Iterable[Pair],
    file_uploads: Iterable[FileUpload],
    enctype: str | None,
    boundary: str | None = None,
) -> Payload:
    """Encode a request body according to ``enctype``.

    Unknown enctypes fall back to urlencoding; file uploads are only sent
    with multipart encoding.
    """
    settings = get_settings()
    if is_multipart(enctype):
        return encode_multipart(
            pairs, file_uploads, boundary=boundary, charset=settings.charset
        )
    body = urlencode_pairs(pairs, charset=settings.charset)
    return Payload(body=body.encode("ascii"), content_type=URLENCODED)
