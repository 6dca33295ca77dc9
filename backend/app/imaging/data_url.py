"""``data:`` URL codec and upload validation for chest images."""

from __future__ import annotations

import base64
import binascii
import io
from urllib.parse import unquote_to_bytes

from PIL import Image, UnidentifiedImageError

from app.errors import InvalidImage

_TOO_LARGE_DIMENSIONS = "Image dimensions are too large"


def decode_data_url(url: str) -> tuple[str, bytes]:
    """Split a ``data:`` URL into (mime type, payload bytes)."""
    if not url or not url.startswith("data:") or "," not in url:
        raise InvalidImage("Image must be provided as a data URL")
    header, payload = url[5:].split(",", 1)
    parts = header.split(";")
    mime = parts[0].strip().lower() or "text/plain"
    if "base64" in (p.strip().lower() for p in parts[1:]):
        try:
            data = base64.b64decode("".join(payload.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidImage("Image data is not valid base64") from e
    else:
        data = unquote_to_bytes(payload)
    return mime, data


def encode_data_url(mime: str, data: bytes) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def validate_image_data(url: str, max_bytes: int, max_pixels: int | None = None) -> tuple[str, bytes]:
    """Decode and check an uploaded image: image MIME, size ceiling, pixel ceiling, decodable by Pillow."""
    mime, data = decode_data_url(url)
    if not mime.startswith("image/"):
        raise InvalidImage()
    if len(data) > max_bytes:
        raise InvalidImage(f"Image must be less than {max_bytes // (1024 * 1024)}MB")
    try:
        with Image.open(io.BytesIO(data)) as img:
            if max_pixels is not None and img.width * img.height > max_pixels:
                raise InvalidImage(_TOO_LARGE_DIMENSIONS)
            img.verify()
    except Image.DecompressionBombError as e:
        raise InvalidImage(_TOO_LARGE_DIMENSIONS) from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidImage("Image could not be decoded") from e
    return mime, data
