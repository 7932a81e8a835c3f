"""Bidirectional conversion between the External and Internal term shapes.

WHY: Systems on the External side spell strings as character-code lists
and null as a symbolic atom. Python code wants ``str`` and ``None``.
Every nested string-like list anywhere in a structure has to be
normalised without the caller annotating types.

HOW: Each value is classified once (``terms.classify``) and handled by
the rule for its kind. Composite values are not converted by native
recursion: the walker keeps an explicit work stack of pending children
and rebuild steps, so depth is bounded by memory rather than by the
interpreter recursion limit.

RULES (to_internal; to_external mirrors it):
1. External null → Internal null, checked before anything else
2. List with no non-int element (including ``[]``) → decoded ``str``;
   any other list → element-wise conversion, same length and order
3. Tagged pair with the External null as tag → (Internal null, payload')
4. Tagged pair with any other scalar tag → (tag, payload')
5. Other tuples → element-wise conversion, same arity, never text
6. Everything else → unchanged
- Conversion never raises; unrecognised values pass through
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from term_codec.config import ConverterOptions, default_options
from term_codec.core.terms import TermKind, classify, is_char_list, is_tagged_pair

logger = logging.getLogger(__name__)


@dataclass
class _Done:
    """A value that needs no further work."""

    value: Any


@dataclass
class _Rebuild:
    """Children still to convert, plus how to reassemble them."""

    children: List[Any]
    rebuild: Callable[[List[Any]], Any]


_Step = Union[_Done, _Rebuild]


def _is_sentinel(value: Any, sentinel: Any) -> bool:
    # Type check first so 0 == False style coincidences never match.
    if value is sentinel:
        return True
    return type(value) is type(sentinel) and value == sentinel


def _rebuild_tuple(original: tuple) -> Callable[[List[Any]], tuple]:
    """Return a builder that restores the concrete tuple type."""
    if hasattr(original, "_fields"):
        cls = type(original)
        return lambda items: cls(*items)
    return tuple


def _walk(root: Any, expand: Callable[[Any], _Step]) -> Any:
    """Convert ``root`` depth-first without native recursion.

    WHY: Deeply nested input would otherwise hit ``RecursionError``,
    which would break the converter's no-failure contract.

    HOW: Two stacks. ``work`` holds either values to visit or pending
    rebuild steps; ``results`` holds converted values. Children are pushed
    in reverse so they complete left to right, and a rebuild step pops
    exactly as many results as it has children.
    """
    work: List[Any] = [(False, root)]
    results: List[Any] = []

    while work:
        is_rebuild, item = work.pop()
        if is_rebuild:
            count = len(item.children)
            if count:
                converted = results[-count:]
                del results[-count:]
            else:
                converted = []
            results.append(item.rebuild(converted))
            continue

        step = expand(item)
        if isinstance(step, _Done):
            results.append(step.value)
            continue

        work.append((True, step))
        for child in reversed(step.children):
            work.append((False, child))

    return results.pop()


class TermShapeConverter:
    """Converts values between the External and Internal conventions.

    The converter holds only its ``ConverterOptions``; it keeps no state
    between calls and can be shared freely.
    """

    def __init__(self, options: Optional[ConverterOptions] = None) -> None:
        self.options = options if options is not None else default_options()

    def to_internal(self, value: Any) -> Any:
        """Convert an External-convention value to the Internal convention.

        Args:
            value: Any value; lists of character codes become ``str`` and
                   the External null sentinel becomes the Internal one.

        Returns:
            The converted value. Never raises.
        """
        return _walk(value, self._expand_internal)

    def to_external(self, value: Any) -> Any:
        """Convert an Internal-convention value to the External convention.

        Args:
            value: Any value; ``str`` becomes a list of code points and the
                   Internal null sentinel becomes the External one.

        Returns:
            The converted value. Never raises.
        """
        return _walk(value, self._expand_external)

    def _expand_internal(self, value: Any) -> _Step:
        opts = self.options
        if _is_sentinel(value, opts.external_null):
            return _Done(opts.internal_null)

        kind = classify(value)
        if kind is TermKind.SEQUENCE:
            if is_char_list(value):
                return _Done("".join(map(chr, value)))
            return _Rebuild(list(value), list)
        if kind is TermKind.TUPLE:
            return self._expand_tuple(value, opts.external_null, opts.internal_null)
        if kind is TermKind.OTHER:
            self._note_passthrough(value)
        return _Done(value)

    def _expand_external(self, value: Any) -> _Step:
        opts = self.options
        if _is_sentinel(value, opts.internal_null):
            return _Done(opts.external_null)

        kind = classify(value)
        if kind is TermKind.TEXT:
            return _Done([ord(char) for char in value])
        if kind is TermKind.SEQUENCE:
            return _Rebuild(list(value), list)
        if kind is TermKind.TUPLE:
            return self._expand_tuple(value, opts.internal_null, opts.external_null)
        if kind is TermKind.OTHER:
            self._note_passthrough(value)
        return _Done(value)

    def _expand_tuple(self, value: tuple, null_in: Any, null_out: Any) -> _Step:
        """Tagged pairs keep their tag; other tuples convert element-wise."""
        build = _rebuild_tuple(value)
        if is_tagged_pair(value):
            tag = value[0]
            if _is_sentinel(tag, null_in):
                tag = null_out
            return _Rebuild([value[1]], lambda items: build([tag, items[0]]))
        return _Rebuild(list(value), build)

    def _note_passthrough(self, value: Any) -> None:
        if self.options.log_passthrough:
            logger.debug("Passing through unrecognised %s value unchanged", type(value).__name__)


def to_internal(value: Any, options: Optional[ConverterOptions] = None) -> Any:
    """Convert ``value`` from the External to the Internal convention."""
    return TermShapeConverter(options).to_internal(value)


def to_external(value: Any, options: Optional[ConverterOptions] = None) -> Any:
    """Convert ``value`` from the Internal to the External convention."""
    return TermShapeConverter(options).to_external(value)
