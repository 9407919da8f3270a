"""Brace expansion.

``a{b,c}d`` expands to ``abd`` and ``acd``; groups nest
(``a{b,c{d,e}}f``) and ``{1..5}`` / ``{5..1}`` expand to inclusive numeric
sequences.  Malformed groups never raise: an unmatched ``{`` and a group with
fewer than two members are kept as escaped literals (``\\{`` ... ``\\}``) for
the segment compiler to resolve.
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, replace
from typing import Union

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Text:
    """Literal text, escapes still embedded."""

    text: str

    def expand(self) -> list[str]:
        return [self.text]


@dataclass(frozen=True)
class Group:
    """One ``{...}`` alternation with the text immediately around it."""

    prefix: str
    members: tuple
    suffix: str = ""

    def expand(self) -> list[str]:
        return [
            self.prefix + value + self.suffix
            for member in self.members
            for value in member.expand()
        ]


@dataclass(frozen=True)
class Concat:
    """A group member made of several consecutive parts (``{a{b,c},d}``)."""

    parts: tuple

    def expand(self) -> list[str]:
        return _cartesian(self.parts)


Node = Union[Text, Group, Concat]


def _parse_int(text: str) -> int | None:
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else None


def _find_closing_brace(text: str, idx: int, end: int) -> int:
    """Return the index of the ``}`` closing the group opened before *idx*, or -1."""
    depth = 1
    while idx < end:
        char = text[idx]
        if char == "\\":
            idx += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return idx
        idx += 1
    return -1


def _collapse(parts: list[Node]) -> Node:
    if not parts:
        return Text("")
    if len(parts) == 1:
        return parts[0]
    return Concat(tuple(parts))


def parse_brace_list(
    text: str, start: int = 0, end: int | None = None, level: int = 0,
) -> list[Node]:
    """Parse ``text[start:end]`` into brace nodes.

    At level 0 the result is the sequence of parts making up the whole
    pattern.  Inside a group (level > 0) it is the list of the group's
    members, split on unescaped commas.
    """
    if end is None:
        end = len(text)
    members: list[Node] = []
    parts: list[Node] = []
    buf: list[str] = []

    def flush() -> None:
        if not buf:
            return
        chunk = "".join(buf)
        buf.clear()
        if parts and isinstance(parts[-1], Group):
            parts[-1] = replace(parts[-1], suffix=parts[-1].suffix + chunk)
        elif parts and isinstance(parts[-1], Text):
            parts[-1] = Text(parts[-1].text + chunk)
        else:
            parts.append(Text(chunk))

    def close_member() -> None:
        flush()
        members.append(_collapse(parts))
        parts.clear()

    i = start
    while i < end:
        char = text[i]
        i += 1
        if char == "\\":
            buf.append(char)
            if i < end:
                buf.append(text[i])
                i += 1
        elif char == "," and level > 0:
            close_member()
        elif char == "." and level > 0 and i < end and text[i] == "." and not parts:
            first = _parse_int("".join(buf))
            last = _parse_int(text[i + 1:end])
            if first is None or last is None:
                buf.append(char)
                continue
            step = -1 if first > last else 1
            members.extend(Text(str(n)) for n in range(first, last + step, step))
            return members
        elif char == "{":
            j = _find_closing_brace(text, i, end)
            if j == -1:
                buf.append("\\{")
                continue
            nested = parse_brace_list(text, i, j, level + 1)
            i = j + 1
            if len(nested) > 1:
                parts.append(Group("".join(buf), tuple(nested)))
                buf.clear()
                continue
            # Not an alternation: keep the braces as literals, but a sole
            # nested group still expands ("a{{b,c}}d").
            buf.append("\\{")
            sole = nested[0] if nested else Text("")
            if isinstance(sole, Text):
                buf.append(sole.text)
            else:
                flush()
                parts.extend(sole.parts if isinstance(sole, Concat) else (sole,))
            buf.append("\\}")
        else:
            buf.append(char)

    if level == 0:
        flush()
        return parts
    # a trailing empty member is dropped: "{b,}" has one member
    if buf or parts or not members:
        close_member()
    return members


def expand(node: Node) -> list[str]:
    """Expand one brace node into its flat alternatives."""
    return node.expand()


def _cartesian(nodes) -> list[str]:
    return ["".join(combo) for combo in itertools.product(*(n.expand() for n in nodes))]


def expand_braces(pattern: str) -> list[str]:
    """Expand all brace groups in *pattern*, left to right, depth first."""
    return _cartesian(parse_brace_list(pattern))
