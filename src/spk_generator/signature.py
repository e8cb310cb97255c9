"""Signature image handling: media-type checks and data URL encoding."""

import base64
import binascii
import io
import logging
import mimetypes
import re

from PIL import Image

from .errors import InvalidFileTypeError

logger = logging.getLogger(__name__)

IMAGE_MEDIA_PREFIX = "image/"

_DATA_URL = re.compile(r"^data:(?P<mime>[^;,]*)(?P<b64>;base64)?,(?P<payload>.*)$", re.DOTALL)


def resolve_media_type(filename: str | None, content_type: str | None) -> str:
    """Return the declared media type, guessing from the filename if absent."""
    if content_type:
        return content_type.strip().lower()
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return ""


def encode_data_url(data: bytes, media_type: str) -> str:
    """Encode raw bytes as a base64 ``data:`` URL."""
    payload = base64.b64encode(data).decode('ascii')
    return f"data:{media_type};base64,{payload}"


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a ``data:`` URL into its media type and raw bytes.

    Args:
        data_url: URL produced by :func:`encode_data_url`.

    Returns:
        Tuple of (media_type, raw_bytes)

    Raises:
        ValueError: If the string is not a well-formed data URL.
    """
    match = _DATA_URL.match(data_url or "")
    if not match:
        raise ValueError("Not a data URL")

    payload = match.group('payload')
    if match.group('b64'):
        try:
            raw = base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 payload: {e}") from e
    else:
        raw = payload.encode('utf-8')
    return match.group('mime'), raw


def prepare_signature(filename: str | None, content_type: str | None, data: bytes) -> str:
    """Validate an uploaded signature file and encode it for storage.

    Only the declared media type is checked; the content itself is decoded
    later, when a document is rasterized.

    Args:
        filename: Original filename of the upload.
        content_type: Declared media type, e.g. ``image/png``.
        data: File content.

    Returns:
        The signature as a data URL.

    Raises:
        InvalidFileTypeError: If the media type is not an image type.
    """
    media_type = resolve_media_type(filename, content_type)
    if not media_type.startswith(IMAGE_MEDIA_PREFIX):
        logger.warning(f"Rejected signature upload {filename!r} with media type {media_type!r}")
        raise InvalidFileTypeError("File harus berupa gambar (PNG, JPG, dll)")

    logger.info(f"Accepted signature upload {filename!r} ({media_type}, {len(data)} bytes)")
    return encode_data_url(data, media_type)


def open_signature_image(data_url: str) -> Image.Image:
    """Decode a stored signature into an RGBA Pillow image.

    Raises:
        ValueError: If the data URL is malformed.
        OSError: If Pillow cannot identify or decode the image.
    """
    _, raw = decode_data_url(data_url)
    with Image.open(io.BytesIO(raw)) as img:
        img.load()
        return img.convert('RGBA')
