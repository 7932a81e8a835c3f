"""term_codec — term shape conversion and hex text codec.

WHY: Data that crosses between systems arrives in two term conventions:
one spells strings as character-code lists and null as a symbolic atom,
the other uses packed text and ``None``. Byte payloads in the same data
are exchanged as hexadecimal text. This package provides both
transformations as small, pure functions.

HOW: Two independent components over one value model (core.terms):
  core.shape       — to_internal / to_external term conversion
  codecs.hex_text  — encode / decode / pretty_print for hex text

RULES:
- Both components are pure: no I/O, no shared mutable state
- The converter never raises; the codec raises MalformedHex on bad input
- Options (null sentinels) are passed explicitly; config only supplies defaults
"""

from term_codec.core.terms import Atom, TaggedPair, TermKind, classify
from term_codec.errors import MalformedHex, TermCodecError
from term_codec.config import ConverterOptions, default_options
from term_codec.core.shape import TermShapeConverter, to_external, to_internal
from term_codec.codecs.hex_text import decode, encode, pretty_print

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "TaggedPair",
    "TermKind",
    "classify",
    "MalformedHex",
    "TermCodecError",
    "ConverterOptions",
    "default_options",
    "TermShapeConverter",
    "to_internal",
    "to_external",
    "encode",
    "decode",
    "pretty_print",
]
