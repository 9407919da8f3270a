"""Segment-by-segment path matching with globstar backtracking."""

from __future__ import annotations

from typing import Sequence

from ._glob import PATH_SPLIT, can_swallow
from ._types import GLOBSTAR, CompiledPattern, Options


def split_path(path: str) -> list[str]:
    """Split *path* on runs of ``/``; a trailing slash leaves an empty last segment."""
    return PATH_SPLIT.split(path)


def match_pattern(
    segments: Sequence[str],
    segment_idx: int,
    pattern: CompiledPattern,
    pattern_idx: int,
    options: Options,
) -> bool:
    """Match ``segments[segment_idx:]`` against ``pattern[pattern_idx:]``.

    A pattern made of a single non-globstar segment matches if *any* path
    segment matches it, so ``*.js`` matches ``lib/app.js``.

    A ``**`` at the end of the pattern swallows the remaining segments; in
    the middle it tries every split point, stopping at the first segment it
    may not swallow (``.``, ``..``, and dot names unless ``options.dot``).
    """
    n_segments = len(segments)
    n_pattern = len(pattern)
    ignore_case = options.ignore_case

    if n_pattern == 1 and pattern[0] is not GLOBSTAR:
        matcher = pattern[0]
        return any(matcher.matches(s, ignore_case) for s in segments[segment_idx:])

    while segment_idx < n_segments and pattern_idx < n_pattern:
        matcher = pattern[pattern_idx]
        if matcher is GLOBSTAR:
            if pattern_idx == n_pattern - 1:
                return all(can_swallow(s, options.dot) for s in segments[segment_idx:])
            for offset in range(segment_idx, n_segments):
                if match_pattern(segments, offset, pattern, pattern_idx + 1, options):
                    return True
                if not can_swallow(segments[offset], options.dot):
                    break
            return False
        if not matcher.matches(segments[segment_idx], ignore_case):
            return False
        segment_idx += 1
        pattern_idx += 1

    if pattern_idx < n_pattern:
        return False
    if segment_idx == n_segments:
        return True
    # only a trailing slash may be left over
    return segment_idx == n_segments - 1 and segments[segment_idx] == ""
