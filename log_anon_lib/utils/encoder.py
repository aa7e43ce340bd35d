"""
Compact text encoder for digest bytes.

The encoder packs the input bits little‑endian first: the first byte supplies
the lowest 8 bits of one big unsigned integer, and every output character is
the next 6‑bit group of that integer, lowest group first.  Three input bytes
therefore yield exactly four characters; a trailing 1 or 2 bytes yield 2 or 3
characters.  No padding is ever emitted.

This is **not** standard base64 – neither the alphabet nor the bit order
match RFC 4648.
"""

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRTSUVWXYZ-_"

_MASK = 0x3F


def encoded_length(size: int) -> int:
    """Number of characters :func:`encode` produces for ``size`` input bytes."""
    return (size * 4 + 2) // 3


def encode(data: bytes) -> str:
    """
    Encode ``data`` with the 64‑symbol :data:`ALPHABET`.

    Parameters
    ----------
    data : bytes
        Arbitrary bytes (typically a digest).

    Returns
    -------
    str
        Printable string of length ``ceil(len(data) * 4 / 3)``.
    """
    result = []
    last = len(data) - 1
    for i, c in enumerate(data):
        pos = i % 3
        if pos == 0:
            result.append(ALPHABET[c & _MASK])
            if i == last:
                result.append(ALPHABET[c >> 6])
        elif pos == 1:
            result.append(ALPHABET[((c << 2) | (data[i - 1] >> 6)) & _MASK])
            if i == last:
                result.append(ALPHABET[c >> 4])
        else:
            result.append(ALPHABET[((c << 4) | (data[i - 1] >> 4)) & _MASK])
            result.append(ALPHABET[c >> 2])
    return "".join(result)
