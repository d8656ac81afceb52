# expecta/match/tokens.py
"""Token input side of the engine.

Tokens are produced elsewhere. Anything with ``type`` and ``value`` works,
either as attributes (``Token`` below, a lexer's own token class) or as
mapping keys (``{"type": "num", "value": "1"}``).
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, Optional, Union, overload

if TYPE_CHECKING:
    from ..tree.nodes import Node


@dataclass(frozen=True)
class Token:
    type: str   # semantic category, e.g. "identifier"
    value: str  # literal text


def token_type(tok: Any) -> Optional[Any]:
    if isinstance(tok, Mapping):
        return tok.get("type")
    return getattr(tok, "type", None)


def token_value(tok: Any) -> Optional[Any]:
    if isinstance(tok, Mapping):
        return tok.get("value")
    return getattr(tok, "value", None)


class TokenSlice(Sequence):
    """Read-only suffix view over a token sequence.

    Slicing with ``[n:]`` (or any step-less slice) gives another view over the
    same underlying sequence, so walking through the input never copies it.
    """

    __slots__ = ("_tokens", "_start", "_stop")

    def __init__(self, tokens: Sequence, start: int = 0, stop: Optional[int] = None):
        if isinstance(tokens, TokenSlice):
            base = tokens._start
            # Offsets are relative to the wrapped view and never reach before it.
            stop = tokens._stop if stop is None else min(max(base + stop, base), tokens._stop)
            start = max(base + start, base)
            tokens = tokens._tokens
        n = len(tokens)
        if stop is None or stop > n:
            stop = n
        self._tokens = tokens
        self._start = min(max(start, 0), stop)
        self._stop = stop

    @property
    def offset(self) -> int:
        """Position of this view's first token in the underlying sequence."""
        return self._start

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> Any: ...
    @overload
    def __getitem__(self, index: slice) -> "TokenSlice": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            if index.step not in (None, 1):
                return list(self)[index]
            start, stop, _ = index.indices(len(self))
            return TokenSlice(self._tokens, self._start + start, self._start + max(start, stop))
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("token index out of range")
        return self._tokens[self._start + index]

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._start, self._stop):
            yield self._tokens[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"TokenSlice({list(self)!r}, offset={self._start})"


def rest_after(tokens: Sequence, node: Node) -> Sequence:
    """Tokens left over once ``node`` has consumed its share of ``tokens``."""
    return tokens[node.length:]
