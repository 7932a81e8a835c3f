"""Shared fixtures for the term_codec test suite.

WHY: Converter tests and codec tests both lean on the same handful of
sample values: the "nodes" character list, the 1..8 ASCII byte run, and
explicit converter options. Keeping them here avoids drift between test
modules.

HOW: Plain pytest fixtures. Options are built explicitly rather than read
from the environment so results never depend on a developer's .env file.

RULES:
- NODES_CHARS decodes to "nodes"
- DIGIT_BYTES is b"12345678", whose hex form is "3132333435363738"
"""

from typing import List

import pytest

from term_codec.config import ConverterOptions
from term_codec.core.shape import TermShapeConverter
from term_codec.core.terms import Atom

NODES_CHARS: List[int] = [110, 111, 100, 101, 115]

DIGIT_BYTES = bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x36, 0x37, 0x38])
DIGIT_HEX = "3132333435363738"

EXTERNAL_NULL = Atom("null")
OK = Atom("ok")
ERROR = Atom("error")


@pytest.fixture
def options():
    """Default sentinels: Atom("null") outside, None inside."""
    return ConverterOptions(external_null=EXTERNAL_NULL, internal_null=None)


@pytest.fixture
def converter(options):
    return TermShapeConverter(options)


@pytest.fixture
def nested_external_term():
    """A mixed External-convention term exercising every rule once."""
    return [
        (OK, list(NODES_CHARS)),
        (EXTERNAL_NULL, [104, 105]),
        EXTERNAL_NULL,
        (1, 2.5, [120]),
        [OK, [121]],
    ]
