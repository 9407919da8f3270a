"""Public matching API: translate, matches, filter."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable

from ._glob import make
from ._match import match_pattern, split_path
from ._types import CompiledPattern, Options
from .exceptions import PatternTypeError


def _require_str(value, what: str) -> None:
    if not isinstance(value, str):
        raise PatternTypeError(f"{what} must be str, not {type(value).__name__}")


def _resolve_options(options: Options | None, overrides: dict) -> Options:
    """Apply keyword overrides (``dot=True`` ...) on top of *options*."""
    if options is None:
        options = Options()
    if overrides:
        options = replace(options, **overrides)
    return options


@dataclass(frozen=True)
class PatternSet:
    """A translated glob: the brace alternatives plus the negation flag.

    Build one with :func:`translate` and reuse it for any number of paths.
    """

    patterns: tuple[CompiledPattern, ...]
    is_negated: bool = False
    options: Options = field(default_factory=Options)

    def any_match(self, path: str) -> bool:
        """True if any alternative matches *path*, ignoring negation."""
        _require_str(path, "path")
        segments = split_path(path)
        return any(
            match_pattern(segments, 0, pattern, 0, self.options)
            for pattern in self.patterns
        )

    def matches(self, path: str) -> bool:
        return self.any_match(path) != self.is_negated

    __call__ = matches


def translate(pattern: str, options: Options | None = None, **overrides) -> PatternSet:
    """Compile *pattern* into a :class:`PatternSet`.

    Every leading ``!`` flips the negation state (which starts at
    ``options.negate``) and is consumed; the rest is brace-expanded and
    compiled segment by segment.
    """
    _require_str(pattern, "pattern")
    options = _resolve_options(options, overrides)
    is_negated = options.negate
    while pattern.startswith("!"):
        is_negated = not is_negated
        pattern = pattern[1:]
    return PatternSet(make(pattern, options), is_negated, options)


def get_matcher(
    pattern: str, options: Options | None = None, **overrides,
) -> Callable[[str], bool]:
    """Return a predicate testing paths against *pattern*."""
    return translate(pattern, options, **overrides).matches


def matches(path: str, pattern: str, options: Options | None = None, **overrides) -> bool:
    """Return True if *path* matches the glob *pattern*.

    >>> matches("lib/app.js", "**/*.{js,json}")
    True
    >>> matches("a/.hidden", "a/*")
    False
    """
    _require_str(path, "path")
    return translate(pattern, options, **overrides).matches(path)


def filter(  # noqa: A001
    paths: Iterable[str], pattern: str, options: Options | None = None, **overrides,
) -> list[str]:
    """Return the paths matching *pattern*, in their original order.

    The pattern is compiled once for the whole collection.
    """
    if isinstance(paths, str):
        raise PatternTypeError("paths must be an iterable of str, not str")
    pattern_set = translate(pattern, options, **overrides)
    return [path for path in paths if pattern_set.matches(path)]
