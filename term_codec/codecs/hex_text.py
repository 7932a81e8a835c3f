"""Hexadecimal encoding, decoding and pretty-printing of byte sequences.

WHY: Bytes travel through logs, configuration and test fixtures as hex
text. Callers need one canonical form to produce (two uppercase digits per
byte), a forgiving reader for what humans paste (``0x`` prefixes,
spaces between pairs), and a readable listing for debugging.

HOW: All three operations stream left to right, one byte at a time.
``iter_hex_pairs`` yields the two-digit form of each byte and backs both
``encode`` and ``pretty_print``. ``decode`` walks the text once, skipping
separators and pairing nibbles as it goes, and raises at the first bad
character.

RULES:
- Output digits are uppercase, two per byte, left-zero-padded
- encode(int) is bare uppercase hex with no padding ("BC614E")
- decode strips surrounding whitespace and ONE leading "0x"/"0X"
- Separators (space, tab, CR, LF) may appear anywhere after the prefix
- A "0x" appearing mid-string is malformed
- Odd digit count or any non-hex character → MalformedHex, no partial output
- pretty_print wraps byte buffers in "<<...>>" and integer sequences in "[...]"
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Union

from term_codec.core.terms import is_plain_int
from term_codec.errors import MalformedHex

logger = logging.getLogger(__name__)

HEX_PREFIX = "0x"
"""Optional prefix accepted by decode() and used by pretty_print()."""

HEX_SEPARATORS = frozenset(" \t\r\n")
"""Characters decode() discards between digits."""

_DIGITS = "0123456789ABCDEF"

_NIBBLES = {char: index for index, char in enumerate(_DIGITS)}
_NIBBLES.update({char.lower(): index for char, index in list(_NIBBLES.items())})

_BUFFER_TYPES = (bytes, bytearray, memoryview, str)

HexInput = Union[bytes, bytearray, memoryview, str, int, Iterable[int]]


def _as_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """Return the raw bytes of a buffer; text is UTF-8 encoded first."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _byte_pair(value: Any, index: int) -> str:
    if not is_plain_int(value):
        raise TypeError(
            "Element {} is {}, expected an int in range 0..255".format(
                index, type(value).__name__
            )
        )
    if not 0 <= value <= 0xFF:
        raise ValueError("Element {} out of byte range 0..255: {}".format(index, value))
    return _DIGITS[value >> 4] + _DIGITS[value & 0x0F]


def iter_hex_pairs(data: Union[bytes, bytearray, memoryview, str, Iterable[int]]) -> Iterator[str]:
    """Yield the two-digit uppercase hex form of each byte in ``data``.

    Args:
        data: A byte buffer, a ``str`` (UTF-8 encoded), or any iterable of
              ints in range 0..255.

    Yields:
        One two-character string per byte, in input order.

    Raises:
        TypeError: If ``data`` is not iterable or an element is not an int.
        ValueError: If an element is outside 0..255.
    """
    if isinstance(data, _BUFFER_TYPES):
        for value in _as_bytes(data):
            yield _DIGITS[value >> 4] + _DIGITS[value & 0x0F]
        return

    if is_plain_int(data) or isinstance(data, bool):
        raise TypeError("Expected a byte sequence, got {}".format(type(data).__name__))

    try:
        elements = iter(data)
    except TypeError:
        raise TypeError(
            "Expected a byte sequence, got {}".format(type(data).__name__)
        ) from None

    for index, value in enumerate(elements):
        yield _byte_pair(value, index)


def encode(data: HexInput) -> str:
    """Encode bytes, an integer sequence, or a single integer as hex text.

    WHY: Byte sequences need a fixed-width form that decodes back exactly;
    integers are usually wanted in their natural width instead.

    HOW: A non-negative ``int`` goes through ``format(n, "X")``. Everything
    else is streamed through ``iter_hex_pairs`` and joined.

    RULES:
    - Sequence mode: len(result) == 2 * element count
    - Integer mode: no padding to an even width (12345678 → "BC614E")
    - Negative integers and out-of-range elements raise ValueError

    Args:
        data: ``bytes``/``bytearray``/``memoryview``, ``str``, an iterable
              of ints in 0..255, or a non-negative ``int``.

    Returns:
        Uppercase hexadecimal text without prefix.
    """
    if is_plain_int(data):
        if data < 0:
            raise ValueError("Cannot hex-encode negative integer {}".format(data))
        return format(data, "X")
    return "".join(iter_hex_pairs(data))


def _digits_start(text: str) -> int:
    """Index of the first digit after leading separators and one prefix."""
    index = 0
    while index < len(text) and text[index] in HEX_SEPARATORS:
        index += 1
    if text[index:index + 2].lower() == HEX_PREFIX:
        index += 2
    return index


def decode(text: str) -> bytes:
    """Decode hex text into bytes.

    WHY: Hex pasted from logs and documentation comes in many shapes:
    with or without ``0x``, with spaces between pairs, in either case.

    HOW: Skip leading whitespace and a single optional ``0x``. Walk the
    remaining characters once: separators are ignored, each hex digit
    becomes a nibble, and every second nibble completes a byte.

    RULES:
    - Case-insensitive digits and prefix
    - First non-hex, non-separator character raises MalformedHex with its
      position in ``text``
    - A dangling final nibble raises MalformedHex (odd length)
    - Empty input (or a bare prefix) decodes to b""

    Args:
        text: Hex text such as ``"3132"``, ``"0x3132"`` or ``"31 32"``.

    Returns:
        The decoded bytes.

    Raises:
        MalformedHex: If the text is not valid hex.
        TypeError: If ``text`` is not a ``str``.
    """
    if not isinstance(text, str):
        raise TypeError("Expected hex text as str, got {}".format(type(text).__name__))

    decoded = bytearray()
    high = None

    for position in range(_digits_start(text), len(text)):
        char = text[position]
        if char in HEX_SEPARATORS:
            continue
        nibble = _NIBBLES.get(char)
        if nibble is None:
            logger.debug("Rejecting hex text: bad character %r at %d", char, position)
            raise MalformedHex(text, "unexpected character {!r}".format(char), position)
        if high is None:
            high = nibble
        else:
            decoded.append((high << 4) | nibble)
            high = None

    if high is not None:
        logger.debug("Rejecting hex text: odd number of digits")
        raise MalformedHex(text, "odd number of hex digits")

    return bytes(decoded)


def pretty_print(data: Union[bytes, bytearray, memoryview, str, Iterable[int]]) -> str:
    """Render bytes as a bracketed ``0xHH`` listing.

    Byte buffers (and ``str``, as its UTF-8 bytes) render as
    ``<<0x41, 0x42>>``; lists, tuples and other integer iterables render
    as ``[0x41, 0x42]``. Empty input gives ``<<>>`` or ``[]``.
    """
    if isinstance(data, _BUFFER_TYPES):
        opening, closing = "<<", ">>"
    else:
        opening, closing = "[", "]"
    body = ", ".join(HEX_PREFIX + pair for pair in iter_hex_pairs(data))
    return opening + body + closing
