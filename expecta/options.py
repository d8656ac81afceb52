# expecta/options.py
from __future__ import annotations
from dataclasses import dataclass

ZERO_WIDTH_POLICIES = ("stop", "raise")


@dataclass(frozen=True)
class MatchOptions:
    """
    Matcher construction options.

    - strict_specs: raise ``MatcherSpecError`` for an unrecognized terminal
      spec instead of building a terminal that never matches.
    - zero_width  : what repetition does when its inner matcher succeeds
      without consuming anything. 'stop' ends the loop, 'raise' raises
      ``ZeroWidthRepetitionError``.
    """
    strict_specs: bool = False
    zero_width: str = "stop"

    def __post_init__(self) -> None:
        if self.zero_width not in ZERO_WIDTH_POLICIES:
            raise ValueError(
                f"zero_width must be one of {ZERO_WIDTH_POLICIES}, got {self.zero_width!r}"
            )


DEFAULT_OPTIONS = MatchOptions()
