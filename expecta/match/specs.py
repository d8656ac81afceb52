# expecta/match/specs.py
"""Terminal matcher specs.

A terminal spec is given in one of four shapes and is resolved *once*, when
the terminal matcher is built, into one of the variants below:

- callable ``(token) -> bool``          -> PredicateSpec
- ``str``                               -> LiteralSpec   (value equality)
- compiled pattern (``re``/``regex``)   -> PatternSpec   (search on value)
- ``{"type": T, "value"?: V}`` or an
  object with a string ``type``         -> StructuredSpec

``V`` may be a string (exact value) or a compiled pattern (searched against
the value). Anything else resolves to ``NeverSpec`` unless strict specs are
requested, in which case ``MatcherSpecError`` is raised.
"""

from __future__ import annotations
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import regex

from ..errors import MatcherSpecError
from ..options import DEFAULT_OPTIONS, MatchOptions
from .tokens import token_type, token_value

log = logging.getLogger(__name__)

PATTERN_TYPES = (re.Pattern, type(regex.compile("")))


def pattern(source: str, flags: int = 0):
    """Compile ``source`` with the ``regex`` engine (Unicode classes such as
    ``\\p{L}`` and ``\\p{XID_Start}`` are available)."""
    return regex.compile(source, flags)


def is_pattern(obj: Any) -> bool:
    return isinstance(obj, PATTERN_TYPES)


def _search(pat, value: Any) -> bool:
    return isinstance(value, str) and pat.search(value) is not None


@dataclass(frozen=True)
class PredicateSpec:
    fn: Callable[[Any], Any]

    def test(self, tok: Any) -> bool:
        return bool(self.fn(tok))


@dataclass(frozen=True)
class LiteralSpec:
    text: str

    def test(self, tok: Any) -> bool:
        return token_value(tok) == self.text


@dataclass(frozen=True)
class PatternSpec:
    pat: Any  # compiled re / regex pattern

    def test(self, tok: Any) -> bool:
        return _search(self.pat, token_value(tok))


@dataclass(frozen=True)
class StructuredSpec:
    type: str
    value: Optional[str] = None
    value_pattern: Any = None

    def test(self, tok: Any) -> bool:
        if token_type(tok) != self.type:
            return False
        if self.value is not None:
            return token_value(tok) == self.value
        if self.value_pattern is not None:
            return _search(self.value_pattern, token_value(tok))
        return True


@dataclass(frozen=True)
class NeverSpec:
    raw: Any

    def test(self, tok: Any) -> bool:
        return False


TerminalSpec = Union[PredicateSpec, LiteralSpec, PatternSpec, StructuredSpec, NeverSpec]
SPEC_TYPES = (PredicateSpec, LiteralSpec, PatternSpec, StructuredSpec, NeverSpec)


def _structured(type_: Any, value: Any) -> Optional[StructuredSpec]:
    if not isinstance(type_, str):
        return None
    if isinstance(value, str):
        return StructuredSpec(type_, value=value)
    if is_pattern(value):
        return StructuredSpec(type_, value_pattern=value)
    return StructuredSpec(type_)


def compile_spec(spec: Any, options: MatchOptions = DEFAULT_OPTIONS) -> TerminalSpec:
    if isinstance(spec, SPEC_TYPES):
        return spec
    if isinstance(spec, str):
        return LiteralSpec(spec)
    if is_pattern(spec):
        return PatternSpec(spec)
    if isinstance(spec, Mapping):
        resolved = _structured(spec.get("type"), spec.get("value"))
    elif callable(spec):
        return PredicateSpec(spec)
    else:
        resolved = _structured(getattr(spec, "type", None), getattr(spec, "value", None))
    if resolved is not None:
        return resolved

    if options.strict_specs:
        raise MatcherSpecError(f"unrecognized terminal spec: {spec!r}")
    log.warning("unrecognized terminal spec %r; terminal will never match", spec)
    return NeverSpec(spec)
