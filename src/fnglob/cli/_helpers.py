"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import click

from .._types import GLOBSTAR, Literal, Options


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _glob_options(f):
    """Shared --dot / --no-globstar / --ignore-case / --negate options."""
    f = click.option("--negate", is_flag=True, default=False,
                     help="Invert the match result.")(f)
    f = click.option("-i", "--ignore-case", is_flag=True, default=False,
                     envvar="FNGLOB_IGNORE_CASE",
                     help="Match case-insensitively (or set FNGLOB_IGNORE_CASE).")(f)
    f = click.option("--globstar/--no-globstar", default=True,
                     help="Let '**' span directories (default: on).")(f)
    f = click.option("--dot", is_flag=True, default=False,
                     help="Let wildcards match names starting with '.'.")(f)
    return f


def _format_option(f):
    """Shared --format option for inspection commands."""
    return click.option(
        "--format", "fmt", type=click.Choice(["text", "json"]), default="text",
        help="Output format (default: text).",
    )(f)


def _make_options(dot, globstar, ignore_case, negate) -> Options:
    return Options(dot=dot, globstar=globstar, ignore_case=ignore_case, negate=negate)


def _read_paths(paths) -> list[str]:
    """Return *paths*, or the non-empty lines of stdin when none are given."""
    if paths:
        return list(paths)
    stream = click.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def _segment_dict(matcher) -> dict:
    if matcher is GLOBSTAR:
        return {"type": "globstar"}
    if isinstance(matcher, Literal):
        return {"type": "literal", "text": matcher.text}
    return {
        "type": "regex",
        "regex": matcher.regex.pattern,
        "ignore_case": matcher.ignore_case,
    }


def _segment_label(matcher) -> str:
    if matcher is GLOBSTAR:
        return "**"
    if isinstance(matcher, Literal):
        return repr(matcher.text)
    return f"/{matcher.regex.pattern}/" + ("i" if matcher.ignore_case else "")


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """fnglob: slash-style glob matching.

    Match paths against patterns with '*', '?', '[...]', '{a,b}',
    '{1..9}', '**' and leading '!' negation. Paths are plain strings;
    nothing is read from the filesystem.

    \b
    Quick start:
      fnglob match '**/*.py' src/app.py docs/index.md
      git ls-files | fnglob filter 'src/**/*.{js,json}'
      fnglob expand 'img{1..3}.{png,jpg}'
      fnglob translate --format json '!*.log'
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
