# expecta/tree/nodes.py
"""Parse tree nodes.

Three variants, all immutable once built:

- ``Production``          : a named grammar rule match
- ``AnonymousProduction`` : transient grouping made by the combinators;
                            spliced into its parent instead of nested
- ``Terminal``            : one consumed token

``length`` is the number of tokens a node consumed (leaf count) and is what
the combinators use to advance through the input. ``own_length`` is the
number of immediate children and is only for inspection.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, List, Tuple, Union

TERMINAL_RULE_NAME = "<terminal>"


def _flatten(items: Iterable["Node"]) -> Tuple["Node", ...]:
    out: List[Node] = []
    for item in items:
        if item.anonymous:
            out.extend(item.contents)
        else:
            out.append(item)
    return tuple(out)


@dataclass(frozen=True)
class Production:
    rule_name: str
    contents: Tuple["Node", ...] = field(default_factory=tuple)

    anonymous: ClassVar[bool] = False

    def __post_init__(self) -> None:
        # Anonymous children never survive inside a built node.
        object.__setattr__(self, "contents", _flatten(self.contents))

    @property
    def length(self) -> int:
        return sum(child.length for child in self.contents)

    @property
    def own_length(self) -> int:
        return len(self.contents)

    def __iter__(self):
        return iter(self.contents)


@dataclass(frozen=True)
class AnonymousProduction(Production):
    anonymous: ClassVar[bool] = True


@dataclass(frozen=True)
class Terminal:
    token: Any

    anonymous: ClassVar[bool] = False
    rule_name: ClassVar[str] = TERMINAL_RULE_NAME
    contents: ClassVar[Tuple["Node", ...]] = ()

    @property
    def length(self) -> int:
        return 1

    @property
    def own_length(self) -> int:
        return 1

    def __iter__(self):
        return iter(self.contents)


Node = Union[Production, AnonymousProduction, Terminal]


class ProductionBuilder:
    """Accumulates children for one production and finalizes it.

    A builder that is dropped (because a sequence element failed, say) is
    never linked anywhere, so partial results cannot leak.
    """

    def __init__(self, rule_name: str, anonymous: bool = False):
        self.rule_name = rule_name
        self.anonymous = anonymous
        self._items: List[Node] = []

    @classmethod
    def for_combinator(cls, kind: str) -> "ProductionBuilder":
        return cls(f"<{kind}>", anonymous=True)

    def push(self, node: Node) -> "ProductionBuilder":
        if node.anonymous:
            self._items.extend(node.contents)
        else:
            self._items.append(node)
        return self

    @property
    def length(self) -> int:
        return sum(item.length for item in self._items)

    def build(self) -> Production:
        kind = AnonymousProduction if self.anonymous else Production
        return kind(self.rule_name, tuple(self._items))
