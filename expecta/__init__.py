# expecta/__init__.py
"""expecta: EBNF-style parser combinators over token sequences.

Compose ``terminal``/``sequence``/``alternation``/``optional``/``repetition``
into matchers; calling a matcher on a list of tokens returns a parse tree
(``Production``/``Terminal`` nodes) or ``None``.

Tokenizing text is left to the caller.
"""

from .errors import (
    ExpectaError, MatcherSpecError, UndefinedRuleError, DuplicateRuleError,
    ZeroWidthRepetitionError,
)
from .options import MatchOptions, DEFAULT_OPTIONS
from .tree import (
    Production, AnonymousProduction, Terminal, Node, ProductionBuilder,
    dump_tree, tree_to_data,
)
from .match import (
    Token, TokenSlice, rest_after, pattern, curried,
    terminal, sequence, alternation, optional, repetition, one_or_more, rule,
    Grammar,
)
