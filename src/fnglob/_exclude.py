"""Exclude filtering over ordered glob rules.

Combines explicit ``patterns`` and the lines of an ``exclude_from`` file
into one rule list.  Rules are checked in order and the last one that
matches decides, so a later ``!pattern`` re-includes what an earlier rule
excluded.  A rule ending in ``/`` only applies to directories (and to
everything below a matching directory).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from ._match import split_path
from ._types import Options
from .pattern import PatternSet, _require_str, translate


@dataclass(frozen=True)
class _Rule:
    source: str
    pattern_set: PatternSet
    dir_only: bool

    @classmethod
    def parse(cls, line: str, options: Options) -> "_Rule":
        _require_str(line, "exclude pattern")
        body = line
        dir_only = body.endswith("/") and body.rstrip("/") != ""
        if dir_only:
            body = body.rstrip("/")
        return cls(line, translate(body, options), dir_only)

    def applies(self, rel_path: str, is_dir: bool) -> bool:
        if not self.dir_only:
            return self.pattern_set.any_match(rel_path)
        if is_dir and self.pattern_set.any_match(rel_path):
            return True
        # files below an excluded directory
        parts = split_path(rel_path)
        return any(
            self.pattern_set.any_match("/".join(parts[:depth]))
            for depth in range(1, len(parts))
        )

    @property
    def excludes(self) -> bool:
        return not self.pattern_set.is_negated


class ExcludeFilter:
    """Combines exclude patterns and an exclude-from file."""

    def __init__(
        self,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | None = None,
        options: Options | None = None,
    ) -> None:
        lines: list[str] = list(patterns or ())
        if exclude_from is not None:
            path = Path(exclude_from)
            for raw in path.read_text(encoding="utf-8").splitlines():
                line = raw.strip()
                if line and not line.startswith("#"):
                    lines.append(line)
        self._options = options or Options()
        self._rules = [_Rule.parse(line, self._options) for line in lines]

    # ------------------------------------------------------------------
    @property
    def active(self) -> bool:
        """True if any rule is configured."""
        return bool(self._rules)

    @property
    def rules(self) -> list[str]:
        """The rule lines, in evaluation order."""
        return [rule.source for rule in self._rules]

    # ------------------------------------------------------------------
    def is_excluded(self, rel_path: str, *, is_dir: bool = False) -> bool:
        """Check *rel_path* against the rules; the last matching rule wins."""
        excluded = False
        for rule in self._rules:
            if rule.applies(rel_path, is_dir):
                excluded = rule.excludes
        return excluded

    # ------------------------------------------------------------------
    def filter(self, paths: Iterable[str]) -> list[str]:
        """Drop excluded paths, keeping the order of the rest."""
        return [p for p in paths if not self.is_excluded(p)]
