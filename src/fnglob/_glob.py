"""Per-segment glob compilation and dotfile-aware segment matching."""

from __future__ import annotations

import re

from ._brace import expand_braces
from ._types import GLOBSTAR, CompiledPattern, Literal, Options, Regex, SegmentMatcher

PATH_SPLIT = re.compile(r"/+")

_CLASS_ESCAPE = re.compile(r"([\\\[\]&~|])")
_DOUBLE_DASH = re.compile(r"(?<=-)-")


def _find_closing_bracket(segment: str, idx: int) -> int:
    """Return the index of the ``]`` closing a class whose content starts at *idx*.

    A ``]`` in the first content position (after an optional ``!``/``^``)
    is part of the class.  Returns -1 when the class is unterminated.
    """
    first = idx
    if first < len(segment) and segment[first] in "!^":
        first += 1
    return segment.find("]", first + 1)


def _char_class(content: str) -> str:
    negated = content.startswith("!")
    if negated:
        content = content[1:]
    content = _DOUBLE_DASH.sub(r"\\-", _CLASS_ESCAPE.sub(r"\\\1", content))
    return ("^" if negated else "") + content


def convert_segment(segment: str, options: Options) -> SegmentMatcher:
    """Compile one slash-free glob segment.

    Returns ``GLOBSTAR`` for ``**`` (when enabled), a :class:`Literal` when
    the segment has no wildcard left after resolving ``\\`` escapes, and a
    :class:`Regex` otherwise.
    """
    if segment == "**" and options.globstar:
        return GLOBSTAR

    text: list[str] = []
    source: list[str] = []
    is_regex = False
    # a leading "*" or "?" must not match a leading dot
    if not options.dot and segment[:1] in ("*", "?"):
        source.append(r"(?!\.)")

    n = len(segment)
    i = 0
    while i < n:
        char = segment[i]
        i += 1
        if char == "\\" and i < n:
            char = segment[i]
            i += 1
            text.append(char)
            source.append(re.escape(char))
        elif char == "*":
            is_regex = True
            text.append(char)
            # "a/*" must not match "a/"
            source.append("(?=.).*" if i == 1 else ".*")
        elif char == "?":
            is_regex = True
            text.append(char)
            source.append(".")
        elif char == "[":
            j = _find_closing_bracket(segment, i)
            if j == -1:
                text.append(char)
                source.append(re.escape(char))
                continue
            is_regex = True
            text.append(segment[i - 1:j + 1])
            source.append("[" + _char_class(segment[i:j]) + "]")
            i = j + 1
        else:
            text.append(char)
            source.append(re.escape(char))

    if not is_regex:
        return Literal("".join(text))
    flags = re.DOTALL
    if options.ignore_case:
        flags |= re.IGNORECASE
    try:
        regex = re.compile("".join(source), flags)
    except re.error:
        # e.g. a reversed range "[z-a]": fall back to the literal text
        return Literal("".join(text))
    return Regex(regex, options.ignore_case)


def make(pattern: str, options: Options) -> tuple[CompiledPattern, ...]:
    """Expand braces in *pattern* and compile every alternative segment-wise."""
    return tuple(
        tuple(convert_segment(segment, options) for segment in PATH_SPLIT.split(flat))
        for flat in expand_braces(pattern.strip())
    )


def can_swallow(name: str, dot: bool = False) -> bool:
    """True if ``**`` may absorb the path segment *name*.

    ``.`` and ``..`` are never absorbed; other dot names only with *dot*.
    """
    if name in (".", ".."):
        return False
    return dot or not name.startswith(".")


def match_segment(
    matcher: SegmentMatcher, name: str, *, ignore_case: bool = False, dot: bool = False,
) -> bool:
    """Match a single path segment *name* against a compiled segment."""
    if matcher is GLOBSTAR:
        return can_swallow(name, dot)
    return matcher.matches(name, ignore_case)
