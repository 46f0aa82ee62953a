"""UTF-8 decoding at byte offsets.

The haystack is assumed valid UTF-8; nothing here re-validates it.
"""

from __future__ import annotations


def encode_haystack(haystack: str | bytes) -> bytes:
    """Return the UTF-8 bytes a searcher walks over."""
    if isinstance(haystack, str):
        return haystack.encode("utf-8")
    return bytes(haystack)


def char_width(lead: int) -> int:
    """Encoded length of the character whose first byte is ``lead``."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def is_continuation(byte: int) -> bool:
    return 0x80 <= byte < 0xC0


def is_char_boundary(buf: bytes, i: int) -> bool:
    """True if ``i`` is 0, len(buf), or the start of a character."""
    if i == 0 or i == len(buf):
        return True
    if not 0 < i < len(buf):
        return False
    return not is_continuation(buf[i])


def decode_at(buf: bytes, i: int) -> tuple[str, int]:
    """Decode the character starting at byte ``i``.

    Returns the character and its encoded width.
    """
    width = char_width(buf[i])
    return buf[i : i + width].decode("utf-8"), width


def decode_before(buf: bytes, j: int) -> tuple[str, int]:
    """Decode the character ending at byte ``j``.

    Returns the character and its encoded width.
    """
    i = j - 1
    while i > 0 and is_continuation(buf[i]):
        i -= 1
    return buf[i:j].decode("utf-8"), j - i
