"""Configuration defaults and .env loading.

WHY: The two null sentinels are convention-specific constants that the
caller decides. Keeping their defaults in one place, overridable from the
environment, means no module carries hidden global switches.

HOW: python-dotenv loads the .env file on import. ``ConverterOptions``
bundles the sentinels into one immutable value that callers pass
explicitly; ``default_options()`` reads the environment each time it is
called and builds one when they do not.

RULES:
- TERM_CODEC_EXTERNAL_NULL names the External null atom (default "null")
- The Internal null sentinel defaults to ``None``
- TERM_CODEC_LOG_PASSTHROUGH toggles DEBUG records for values the
  converter does not recognise (default "true")
- Options are always passed at the call site, never stored globally
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from term_codec.core.terms import Atom

# Load .env from the working directory
load_dotenv()

DEFAULT_EXTERNAL_NULL_NAME = "null"
"""Atom name of the External null sentinel when the environment is silent."""


@dataclass(frozen=True)
class ConverterOptions:
    """The pair of null sentinels used by one conversion.

    Attributes:
        external_null: Null under the External convention, e.g. ``Atom("null")``.
        internal_null: Null under the Internal convention, usually ``None``.
        log_passthrough: Emit a DEBUG record whenever an unrecognised
                         value is returned unchanged.
    """

    external_null: Any = Atom(DEFAULT_EXTERNAL_NULL_NAME)
    internal_null: Any = None
    log_passthrough: bool = True


def default_options() -> ConverterOptions:
    """Build ``ConverterOptions`` from the environment.

    RULES:
    - Empty or missing TERM_CODEC_EXTERNAL_NULL falls back to "null"
    - TERM_CODEC_LOG_PASSTHROUGH is true unless set to something other
      than "true" (case-insensitive)
    """
    name = os.getenv("TERM_CODEC_EXTERNAL_NULL", "").strip() or DEFAULT_EXTERNAL_NULL_NAME
    log_passthrough = os.getenv("TERM_CODEC_LOG_PASSTHROUGH", "true").lower() == "true"
    return ConverterOptions(
        external_null=Atom(name),
        internal_null=None,
        log_passthrough=log_passthrough,
    )
