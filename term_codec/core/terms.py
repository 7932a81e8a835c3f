"""Value model shared by the term shape converter and the hex codec.

WHY: Two conventions describe the same composite values. The External
convention spells strings as lists of character codes and uses a symbolic
null atom; the Internal convention uses packed ``str`` values and ``None``.
Both components need one agreed way to tell scalars, text, lists and
tuples apart before they can transform anything.

HOW: Python builtins carry the data (``list``, ``tuple``, ``str``,
numbers). Two small types fill the gaps Python has no builtin for:
``Atom`` for symbolic tags and ``TaggedPair`` for the ``(tag, payload)``
shape. ``classify()`` maps any value onto a ``TermKind`` member so callers
dispatch on an explicit enumeration instead of probing attributes.

RULES:
- ``bool`` is a scalar, never a plain integer (``[True]`` is not text)
- A list is character-code text only if every element is a plain int in
  ``0..MAX_CODE_POINT``; the empty list qualifies
- A tagged pair is any 2-tuple whose first element classifies as SCALAR
- Dicts, sets and arbitrary objects classify as OTHER
"""

from __future__ import annotations

import enum
import numbers
from dataclasses import dataclass
from typing import Any, NamedTuple

# Highest Unicode code point; larger integers cannot be decoded to text.
MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class Atom:
    """A symbolic constant such as ``:ok`` or ``:null``.

    Atoms compare by name, are hashable, and render the way they are
    usually written in term literals.
    """

    name: str

    def __repr__(self) -> str:
        return ":{}".format(self.name)


class TaggedPair(NamedTuple):
    """A ``(tag, payload)`` 2-tuple whose tag discriminates the payload."""

    tag: Any
    payload: Any


class TermKind(enum.Enum):
    """Shape of a value as seen by the converter."""

    SCALAR = "scalar"
    TEXT = "text"
    SEQUENCE = "sequence"
    TUPLE = "tuple"
    OTHER = "other"


def is_plain_int(value: Any) -> bool:
    """True for ``int`` values that are not ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


def classify(value: Any) -> TermKind:
    """Return the ``TermKind`` of ``value``.

    ``None`` counts as a scalar: whether it stands for null depends on
    which convention is being read, and the converter checks the null
    sentinels before it calls this function.
    """
    if value is None or isinstance(value, (bool, numbers.Number, Atom, bytes, bytearray)):
        return TermKind.SCALAR
    if isinstance(value, str):
        return TermKind.TEXT
    if isinstance(value, list):
        return TermKind.SEQUENCE
    if isinstance(value, tuple):
        return TermKind.TUPLE
    return TermKind.OTHER


def is_char_list(value: Any) -> bool:
    """Check whether ``value`` is a list of character codes.

    WHY: The External convention has no separate text type, so a list of
    small integers IS its string. This is the single place that heuristic
    lives.

    RULES:
    - Must be a ``list``; tuples are never text
    - Every element a plain int within ``0..MAX_CODE_POINT``
    - ``[]`` is text (the empty string)
    """
    if not isinstance(value, list):
        return False
    return all(is_plain_int(item) and 0 <= item <= MAX_CODE_POINT for item in value)


def is_tagged_pair(value: Any) -> bool:
    """True for a 2-tuple whose first element is a scalar."""
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and classify(value[0]) is TermKind.SCALAR
    )
