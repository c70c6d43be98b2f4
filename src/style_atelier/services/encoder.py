"""Conversion between uploaded files and base64 data URLs."""

import base64
import binascii
from typing import Protocol

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URL_PREFIX = "data:"
_BASE64_MARKER = ";base64"


class FileSource(Protocol):
    """A locally selected file, such as FastAPI's ``UploadFile``."""

    filename: str | None
    content_type: str | None

    async def read(self) -> bytes:
        """Return the full file contents."""


def to_data_url(
    image_bytes: bytes,
    mime_type: str | None = None,
    default: str = DEFAULT_MIME_TYPE,
) -> str:
    """Convert bytes to a base64 data URL for preview and API input."""
    declared = _base_type(mime_type)
    resolved = declared if _is_image_type(declared) else None
    resolved = resolved or detect_mime_type(image_bytes, default)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"{_DATA_URL_PREFIX}{resolved};base64,{encoded}"


def split_data_url(data_url: str) -> tuple[str, str]:
    """Split a data URL into its media type and base64 payload.

    Raises ``ValueError`` if the string is not a base64 image data URL.
    """
    if not data_url or not data_url.startswith(_DATA_URL_PREFIX):
        raise ValueError("Expected a data URL")
    header, sep, payload = data_url.partition(",")
    if not sep or not payload:
        raise ValueError("Data URL has no payload")
    if not header.endswith(_BASE64_MARKER):
        raise ValueError("Data URL is not base64 encoded")
    mime_type = _base_type(header[len(_DATA_URL_PREFIX) : -len(_BASE64_MARKER)])
    if not _is_image_type(mime_type):
        raise ValueError(f"Unsupported media type: {mime_type or 'missing'}")
    return mime_type, payload


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Return the media type and raw bytes embedded in a data URL."""
    mime_type, payload = split_data_url(data_url)
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError("Data URL payload is not valid base64") from exc


def detect_mime_type(image_bytes: bytes, default: str = DEFAULT_MIME_TYPE) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return default


def extension_for(mime_type: str) -> str:
    """Return a file extension suitable for downloads of the given type."""
    subtype = mime_type.partition("/")[2]
    if subtype == "jpeg":
        return "jpg"
    return subtype or "png"


def _base_type(mime_type: str | None) -> str | None:
    """Drop parameters such as ``; name=photo.png`` from a media type."""
    if mime_type is None:
        return None
    return mime_type.partition(";")[0].strip().lower()


def _is_image_type(mime_type: str | None) -> bool:
    return bool(mime_type) and mime_type.startswith("image/") and len(mime_type) > 6
