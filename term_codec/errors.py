"""Exception types raised by term_codec.

The term shape converter never raises. The hex codec raises
``MalformedHex`` for undecodable text and the builtin ``ValueError`` /
``TypeError`` for input it cannot encode.
"""

from __future__ import annotations

from typing import Optional


class TermCodecError(Exception):
    """Base class for all term_codec errors."""


class MalformedHex(TermCodecError, ValueError):
    """Hex text that cannot be decoded into bytes.

    Attributes:
        text: The original input string.
        position: Index into ``text`` of the offending character, or None
                  when the cleaned digit stream has odd length.
        reason: Short human-readable description.
    """

    def __init__(self, text: str, reason: str, position: Optional[int] = None) -> None:
        self.text = text
        self.reason = reason
        self.position = position
        if position is None:
            message = "Malformed hex {!r}: {}".format(text, reason)
        else:
            message = "Malformed hex {!r} at position {}: {}".format(text, position, reason)
        super().__init__(message)
