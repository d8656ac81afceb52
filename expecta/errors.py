# expecta/errors.py
"""Exception types for grammar *misuse*.

A token sequence that simply does not match is not an error: every matcher
reports that by returning ``None``. The classes below are raised only when
the grammar itself is built or wired incorrectly.
"""

from __future__ import annotations


class ExpectaError(Exception):
    pass


class MatcherSpecError(ExpectaError, TypeError):
    """Terminal spec of a shape no matcher variant understands."""


class UndefinedRuleError(ExpectaError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"undefined rule '{self.name}'"


class DuplicateRuleError(ExpectaError, ValueError):
    pass


class ZeroWidthRepetitionError(ExpectaError, RuntimeError):
    pass
