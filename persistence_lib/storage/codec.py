"""Key <-> filename token conversion.

Encoding is lossy: every character from :data:`INVALID_CHARS` becomes
``_``, so ``"a/b"`` and ``"a:b"`` share the token ``"a_b"`` and address the
same entry (last write wins). Callers that need collision-free storage must
pick keys without those characters (ints, UUIDs, plain identifiers).
"""
from __future__ import annotations
import logging
import uuid
from typing import Any, Optional, Type

logger = logging.getLogger(__name__)

# Same set on every platform so a namespace can move between hosts.
INVALID_CHARS = frozenset('<>:"/\\|?*')
PLACEHOLDER = "_"


def encode_key(key: Any) -> str:
    """Return the filesystem-safe token for `key`."""
    if key is None:
        raise ValueError("key must not be None")
    return "".join(PLACEHOLDER if c in INVALID_CHARS else c for c in str(key))


def decode_key(token: str, key_type: Type[Any] = str) -> Optional[Any]:
    """Best-effort reverse of :func:`encode_key`.

    Returns ``None`` whenever `token` cannot be converted to `key_type`;
    this function never raises.
    """
    try:
        if key_type is str:
            return token
        if key_type is uuid.UUID:
            return uuid.UUID(token)
        if key_type is int:
            return int(token)
        if key_type is bool:
            # bool("False") is True; only accept what str(bool) produces.
            return {"True": True, "False": False}[token]
        return key_type(token)
    except Exception:
        logger.debug("Token %r does not decode to %s", token, getattr(key_type, "__name__", key_type))
        return None


class KeyCodec:
    """Binds :func:`encode_key`/:func:`decode_key` to one key type."""

    def __init__(self, key_type: Type[Any] = str) -> None:
        self.key_type = key_type

    def encode(self, key: Any) -> str:
        return encode_key(key)

    def decode(self, token: str) -> Optional[Any]:
        return decode_key(token, self.key_type)
