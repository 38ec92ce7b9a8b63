"""base64url and compact JSON helpers for token segments."""

import base64
import json
from typing import Any


def base64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str) -> bytes:
    """Decode unpadded base64url, restoring the padding first."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def encode_json_segment(obj: dict[str, Any]) -> str:
    """Serialize a JSON object compactly and base64url-encode it."""
    return base64url_encode(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def decode_segment(segment: str) -> dict[str, Any]:
    """Decode a header or payload segment. Does not check any signature."""
    decoded = json.loads(base64url_decode(segment))
    if not isinstance(decoded, dict):
        raise ValueError("Token segment is not a JSON object")
    return decoded
