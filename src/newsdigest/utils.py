from __future__ import annotations

import hashlib
from typing import Optional

from .config import Defaults


def sha256_bytes(data: bytes) -> str:
    """
    Compute SHA-256 hash of bytes.

    Used to tell uploads apart in the logs without logging their content.
    """
    return hashlib.sha256(data).hexdigest()


def decode_text(raw: bytes) -> str:
    """
    Decode bytes as UTF-8 text, dropping a leading byte order mark.

    Raises:
        UnicodeDecodeError: If bytes are not valid UTF-8
    """
    return raw.decode("utf-8-sig")


def normalize_mime_type(mime_type: Optional[str]) -> str:
    """'Image/PNG; charset=binary' -> 'image/png'"""
    if not mime_type:
        return Defaults.DEFAULT_MIME_TYPE
    return mime_type.split(";", 1)[0].strip().lower() or Defaults.DEFAULT_MIME_TYPE
