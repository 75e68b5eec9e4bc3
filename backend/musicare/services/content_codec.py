"""Data-URL encoding for file content.

Files travel and are stored as ``data:<mime>;base64,<payload>`` strings, the
same form a browser ``FileReader.readAsDataURL`` produces.
"""
import base64
import binascii

_B64_MARKER = ";base64,"


def encode_data_url(data: bytes, mime_type: str = "application/octet-stream") -> str:
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type}{_B64_MARKER}{payload}"


def decode_data_url(content: str) -> bytes:
    """Decode a data URL (or bare base64) back to the original bytes.

    Raises ValueError when the content is not valid base64.
    """
    payload = content
    if content.startswith("data:"):
        _, sep, payload = content.partition(_B64_MARKER)
        if not sep:
            raise ValueError("Data URL is not base64 encoded")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 content: {e}") from e
