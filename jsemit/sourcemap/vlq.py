"""Base64 VLQ codec used by Source Map v3 `mappings`."""

from typing import Final

BASE64: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_INDEX: Final[dict[str, int]] = {char: index for index, char in enumerate(BASE64)}

VLQ_SHIFT: Final[int] = 5
VLQ_MASK: Final[int] = 0b11111
VLQ_CONTINUATION: Final[int] = 0b100000


def encode_vlq(value: int) -> str:
    """Encode a signed integer; the sign lives in the lowest bit of the first digit."""
    data = (-value << 1) | 1 if value < 0 else value << 1

    encoded: list[str] = []
    while True:
        digit = data & VLQ_MASK
        data >>= VLQ_SHIFT
        if data > 0:
            digit |= VLQ_CONTINUATION
        encoded.append(BASE64[digit])
        if data == 0:
            return "".join(encoded)


def decode_vlq(text: str, pos: int = 0) -> tuple[int, int]:
    """Decode one value starting at `pos`; returns (value, position after it)."""
    data = 0
    shift = 0
    while True:
        if pos >= len(text):
            raise ValueError("Truncated VLQ value")
        char = text[pos]
        digit = BASE64_INDEX.get(char)
        if digit is None:
            raise ValueError(f"Invalid base64 VLQ digit {char!r} at {pos}")
        pos += 1
        data |= (digit & VLQ_MASK) << shift
        shift += VLQ_SHIFT
        if not digit & VLQ_CONTINUATION:
            break

    value = data >> 1
    return (-value if data & 1 else value), pos
