# expecta/match/grammar.py
"""Named rule registry.

Combinators are plain closures, so a rule that refers to itself (or to a rule
defined later) needs indirection: ``ref(name)`` looks the rule up when it is
matched, not when it is built.

    g = Grammar()
    g.define("value", alternation([terminal({"type": "num"}), g.ref("list")]))
    g.define("list", sequence([terminal("["), repetition(g.ref("value")), terminal("]")]))
    tree = g.match(tokens, complete=True)

Left recursion is not supported (a left-recursive rule recurses without
consuming input).
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..errors import DuplicateRuleError, ExpectaError, UndefinedRuleError
from ..tree.nodes import Node, Production
from .combinators import Matcher, rule
from .tokens import TokenSlice

log = logging.getLogger(__name__)


@dataclass
class RuleDef:
    name: str
    matcher: Matcher


@dataclass
class Grammar:
    rules: Dict[str, RuleDef] = field(default_factory=dict)
    start: Optional[str] = None

    def define(self, name: str, matcher: Matcher) -> Matcher:
        """Register ``matcher`` as rule ``name``; the first rule defined is
        the default start rule. Returns the named matcher."""
        if name in self.rules:
            raise DuplicateRuleError(f"duplicate rule '{name}'")
        named = rule(name, matcher)
        self.rules[name] = RuleDef(name, named)
        if self.start is None:
            self.start = name
        return named

    def require_rule(self, name: str) -> RuleDef:
        try:
            return self.rules[name]
        except KeyError:
            raise UndefinedRuleError(name) from None

    def ref(self, name: str) -> Matcher:
        def rule_reference(tokens: Sequence) -> Optional[Node]:
            return self.require_rule(name).matcher(tokens)

        rule_reference.__qualname__ = f"ref.<{name}>"
        return rule_reference

    def names(self) -> List[str]:
        return list(self.rules)

    def match(self, tokens: Sequence, start: Optional[str] = None,
              complete: bool = False) -> Optional[Production]:
        """Match the start rule at the beginning of ``tokens``.

        With ``complete=True`` a match that leaves tokens unconsumed counts as
        no match.
        """
        name = start or self.start
        if name is None:
            raise ExpectaError("grammar has no rules")
        view = TokenSlice(tokens)
        node = self.require_rule(name).matcher(view)
        if node is None:
            log.debug("rule %s: no match at offset %d", name, view.offset)
            return None
        if complete and node.length != len(view):
            log.debug("rule %s: matched %d of %d tokens", name, node.length, len(view))
            return None
        log.debug("rule %s: matched %d tokens", name, node.length)
        return node
