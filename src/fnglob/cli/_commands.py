"""Commands: match, filter, expand, translate."""

from __future__ import annotations

import json
from dataclasses import replace

import click

from .._brace import expand_braces
from .._exclude import ExcludeFilter
from ..pattern import translate
from ._helpers import (
    main,
    _format_option,
    _glob_options,
    _make_options,
    _read_paths,
    _segment_dict,
    _segment_label,
    _status,
)


# ---------------------------------------------------------------------------
# match
# ---------------------------------------------------------------------------

@main.command()
@click.argument("pattern")
@click.argument("paths", nargs=-1, required=True)
@_glob_options
@click.pass_context
def match(ctx, pattern, paths, dot, globstar, ignore_case, negate):
    """Print the PATHS that match PATTERN.

    Exits with status 1 when no path matched.

    \b
    Examples:
        fnglob match '*.py' setup.py README.md
        fnglob match --dot 'a/**' a/.cache/x
    """
    options = _make_options(dot, globstar, ignore_case, negate)
    pattern_set = translate(pattern, options)
    n = 0
    for path in paths:
        if pattern_set.matches(path):
            click.echo(path)
            n += 1
    _status(ctx, f"{n} of {len(paths)} path(s) matched")
    if n == 0:
        ctx.exit(1)


# ---------------------------------------------------------------------------
# filter
# ---------------------------------------------------------------------------

@main.command("filter")
@click.argument("pattern")
@click.argument("paths", nargs=-1)
@_glob_options
@click.option("--exclude", "excludes", multiple=True,
              help="Drop paths matching this pattern (repeatable, '!' re-includes).")
@click.option("--exclude-from", type=click.Path(exists=True, dir_okay=False),
              default=None, help="Read exclude patterns from a file.")
@click.pass_context
def filter_cmd(ctx, pattern, paths, dot, globstar, ignore_case, negate,
               excludes, exclude_from):
    """Print the paths that match PATTERN, keeping their order.

    Paths are taken from the arguments, or one per line from stdin when no
    PATHS are given.

    \b
    Examples:
        git ls-files | fnglob filter '**/*.{js,ts}'
        fnglob filter '**' a.txt .env --exclude '*.txt'
    """
    options = _make_options(dot, globstar, ignore_case, negate)
    candidates = _read_paths(paths)
    pattern_set = translate(pattern, options)
    result = [p for p in candidates if pattern_set.matches(p)]

    if excludes or exclude_from:
        try:
            ef = ExcludeFilter(
                patterns=excludes,
                exclude_from=exclude_from,
                options=replace(options, negate=False),
            )
        except (OSError, UnicodeDecodeError) as exc:
            raise click.ClickException(f"Cannot read exclude file: {exc}")
        before = len(result)
        result = ef.filter(result)
        _status(ctx, f"Excluded {before - len(result)} path(s)")

    for path in result:
        click.echo(path)
    _status(ctx, f"{len(result)} of {len(candidates)} path(s) matched")


# ---------------------------------------------------------------------------
# expand
# ---------------------------------------------------------------------------

@main.command()
@click.argument("pattern")
@_format_option
def expand(pattern, fmt):
    """Print the brace expansion of PATTERN, one alternative per line.

    \b
    Examples:
        fnglob expand 'src/{app,lib}/*.{js,json}'
        fnglob expand 'log{1..3}.txt' --format json
    """
    alternatives = expand_braces(pattern)
    if fmt == "json":
        click.echo(json.dumps(alternatives))
    else:
        for alt in alternatives:
            click.echo(alt)


# ---------------------------------------------------------------------------
# translate
# ---------------------------------------------------------------------------

@main.command("translate")
@click.argument("pattern")
@_glob_options
@_format_option
def translate_cmd(pattern, dot, globstar, ignore_case, negate, fmt):
    """Show how PATTERN compiles: one line per alternative.

    Literal segments are quoted, regex segments are shown between slashes
    and '**' marks a globstar.
    """
    options = _make_options(dot, globstar, ignore_case, negate)
    pattern_set = translate(pattern, options)
    if fmt == "json":
        click.echo(json.dumps({
            "negated": pattern_set.is_negated,
            "patterns": [
                [_segment_dict(m) for m in compiled]
                for compiled in pattern_set.patterns
            ],
        }, indent=2))
        return
    if pattern_set.is_negated:
        click.echo("negated")
    for compiled in pattern_set.patterns:
        click.echo(" / ".join(_segment_label(m) for m in compiled))
