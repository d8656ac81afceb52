# expecta/match/combinators.py
"""Matching combinators.

Each ``expect_*`` function takes an argument (a terminal spec, a matcher, or
a list of matchers), a token sequence and the options, and returns a node or
``None``. ``curried`` turns one into the public form, which can be called as

    sequence([m1, m2], tokens)   # match now
    sequence([m1, m2])           # -> reusable matcher: tokens -> node | None

Usage:
    expr = sequence([terminal({"type": "num"}),
                     repetition(sequence([terminal("+"), terminal({"type": "num"})]))])
    node = expr(tokens)

Semantics (PEG-like):
- sequence    : all in order, else None
- alternation : ordered choice, first success wins
- optional    : always succeeds (zero or one)
- repetition  : always succeeds (zero or more); stops on zero-width matches
"""

from __future__ import annotations
import functools
import inspect
from typing import Any, Callable, Optional, Sequence

from ..errors import ZeroWidthRepetitionError
from ..options import DEFAULT_OPTIONS, MatchOptions
from ..tree.nodes import Node, Production, ProductionBuilder, Terminal
from .specs import compile_spec
from .tokens import TokenSlice, rest_after

Matcher = Callable[[Sequence], Optional[Node]]

_MISSING = object()


def curried(general: Callable[..., Optional[Node]],
            prepare: Optional[Callable[[Any, MatchOptions], Any]] = None):
    """Allow ``general(arg, tokens)`` to also be called as ``general(arg)``.

    If ``general`` takes an ``options`` parameter it receives the options
    as a keyword; a plain two-argument function is called with
    ``(arg, tokens)`` only.

    ``prepare`` runs once per matcher build (e.g. resolving a terminal spec),
    not once per match.
    """
    takes_options = "options" in inspect.signature(general).parameters

    @functools.wraps(general)
    def curried_expectation(arg, tokens=_MISSING, *, options: Optional[MatchOptions] = None):
        opts = options or DEFAULT_OPTIONS
        if prepare is not None:
            arg = prepare(arg, opts)
        call = functools.partial(general, options=opts) if takes_options else general
        if tokens is not _MISSING:
            return call(arg, tokens)

        def expectation(curry_tokens: Sequence) -> Optional[Node]:
            return call(arg, curry_tokens)

        expectation.__qualname__ = f"{general.__name__}.<matcher>"
        return expectation

    return curried_expectation


def _freeze_matchers(matchers, options: MatchOptions):
    """``prepare`` hook for list-taking combinators: snapshot the list so
    later edits by the caller don't change a built matcher. ``options`` is
    part of the hook signature and is not needed here."""
    return tuple(matchers)


# ---- General expectation functions ----

def expect_terminal(spec, tokens: Sequence, options: MatchOptions = DEFAULT_OPTIONS) -> Optional[Terminal]:
    if not len(tokens):
        return None
    tok = tokens[0]
    if compile_spec(spec, options).test(tok):
        return Terminal(tok)
    return None


def expect_sequence(matchers, tokens: Sequence, options: MatchOptions = DEFAULT_OPTIONS) -> Optional[Production]:
    production = ProductionBuilder.for_combinator("sequence")
    rest = TokenSlice(tokens)
    for matcher in matchers:
        node = matcher(rest)
        if node is None:
            return None
        production.push(node)
        rest = rest_after(rest, node)
    return production.build()


def expect_alternation(matchers, tokens: Sequence, options: MatchOptions = DEFAULT_OPTIONS) -> Optional[Node]:
    tokens = TokenSlice(tokens)
    for matcher in matchers:
        node = matcher(tokens)
        if node is not None:
            return node
    return None


def expect_optional(matcher: Matcher, tokens: Sequence, options: MatchOptions = DEFAULT_OPTIONS) -> Production:
    production = ProductionBuilder.for_combinator("option")
    node = matcher(TokenSlice(tokens))
    if node is not None:
        production.push(node)
    return production.build()


def _repeat(matcher: Matcher, tokens: Sequence, options: MatchOptions, kind: str) -> ProductionBuilder:
    production = ProductionBuilder.for_combinator(kind)
    rest = TokenSlice(tokens)
    while len(rest):
        node = matcher(rest)
        if node is None:
            break
        if node.length == 0:
            # A zero-width success would repeat forever at this position.
            if options.zero_width == "raise":
                raise ZeroWidthRepetitionError(
                    f"matcher {matcher!r} succeeded without consuming input at token offset {rest.offset}"
                )
            break
        production.push(node)
        rest = rest_after(rest, node)
    return production


def expect_repetition(matcher: Matcher, tokens: Sequence, options: MatchOptions = DEFAULT_OPTIONS) -> Production:
    return _repeat(matcher, tokens, options, "repetition").build()


def expect_one_or_more(matcher: Matcher, tokens: Sequence, options: MatchOptions = DEFAULT_OPTIONS) -> Optional[Production]:
    production = _repeat(matcher, tokens, options, "repetition")
    if production.length == 0:
        return None
    return production.build()


# ---- Public combinators ----

terminal = curried(expect_terminal, prepare=compile_spec)
sequence = curried(expect_sequence, prepare=_freeze_matchers)
alternation = curried(expect_alternation, prepare=_freeze_matchers)
optional = curried(expect_optional)
repetition = curried(expect_repetition)
one_or_more = curried(expect_one_or_more)


def rule(rule_name: str, matcher: Matcher) -> Matcher:
    """Wrap ``matcher`` so its result becomes a named production.

    Anonymous results are spliced into the new node; a terminal or another
    named production becomes its single child.
    """
    def named_expectation(tokens: Sequence) -> Optional[Production]:
        node = matcher(tokens)
        if node is None:
            return None
        return ProductionBuilder(rule_name).push(node).build()

    named_expectation.__qualname__ = f"rule.<{rule_name}>"
    return named_expectation
