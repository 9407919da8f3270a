"""Console script for ``fnglob``; click is only needed once a command runs."""

import sys

_COMMANDS = ("match", "filter", "expand", "translate")


def main():
    try:
        from .cli import main as cli_main
    except ImportError:
        print(
            f"fnglob: the {'/'.join(_COMMANDS)} commands need click, which is not installed.\n"
            "The matching library works without it; for the command line run:\n"
            "    pip install 'fnglob[cli]'",
            file=sys.stderr,
        )
        raise SystemExit(1)
    cli_main()
