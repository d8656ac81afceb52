# expecta/match/__init__.py
"""Token-level matching engine: terminal specs, combinators and grammars."""

from .tokens import Token, TokenSlice, rest_after, token_type, token_value
from .specs import (
    pattern, compile_spec, PredicateSpec, LiteralSpec, PatternSpec,
    StructuredSpec, NeverSpec,
)
from .combinators import (
    curried, terminal, sequence, alternation, optional, repetition,
    one_or_more, rule, Matcher,
)
from .grammar import Grammar, RuleDef
