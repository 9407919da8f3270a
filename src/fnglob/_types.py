"""Options and compiled segment types shared by the compiler and matcher."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Options:
    """Matching options.

    Attributes:
        dot: ``*``, ``?`` and ``**`` may match names starting with ``.``.
        globstar: ``**`` as a whole segment spans directories; when off it
            behaves like ``*``.
        ignore_case: compare names case-insensitively.
        negate: initial negation state, flipped by every leading ``!``.
    """

    dot: bool = False
    globstar: bool = True
    ignore_case: bool = False
    negate: bool = False


@dataclass(frozen=True)
class Literal:
    """A segment without wildcards, compared by string equality."""

    text: str

    def matches(self, name: str, ignore_case: bool = False) -> bool:
        if ignore_case:
            return name.casefold() == self.text.casefold()
        return name == self.text


@dataclass(frozen=True)
class Regex:
    """A wildcard segment compiled to a regular expression over one name."""

    regex: re.Pattern
    ignore_case: bool = False

    def matches(self, name: str, ignore_case: bool = False) -> bool:
        # case folding is baked into the compiled flags
        return self.regex.fullmatch(name) is not None


class _Globstar:
    """Sentinel for a ``**`` segment."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "GLOBSTAR"

    def __reduce__(self):
        return (_Globstar, ())


GLOBSTAR = _Globstar()

SegmentMatcher = Union[Literal, Regex, _Globstar]
CompiledPattern = Tuple[SegmentMatcher, ...]
