"""prompt-env CLI entry point."""

import os
import sys

import click

from .. import __version__
from ..emitter import AssignmentBuffer
from ..parser import EntryParseError, parse_entries
from ..resolver import ValueResolver


@click.command(context_settings=dict(ignore_unknown_options=True))
@click.argument("entries", nargs=-1, type=click.UNPROCESSED)
@click.version_option(__version__, prog_name="prompt-env")
def cli(entries):
    """Prompt for variable values and print them in .env format.

    Each ENTRY is VARNAME or "PROMPT TEXT":VARNAME, optionally followed by
    --secure (or -s) to hide what is typed. Variables already set in the
    environment, even to an empty string, are used without prompting.

    Prompts are written to stderr. The VARNAME="value" lines are written to
    stdout only after every prompt has been answered.

    \b
    Examples:
        prompt-env > .env \\
            "Database user":DB_USER \\
            "Database password":DB_PASSWORD --secure \\
            API_TOKEN -s

        DB_USER=admin prompt-env DB_USER DB_PASSWORD -s
    """
    try:
        specs = parse_entries(entries)
    except EntryParseError as e:
        raise click.UsageError(str(e)) from e

    if not specs:
        return

    # Bytes that do not decode round-trip unchanged, as a shell would pass them
    _pass_undecodable_bytes(sys.stdin)
    _pass_undecodable_bytes(sys.stdout)

    resolver = ValueResolver(os.environ, sys.stdin, sys.stderr)
    buffer = AssignmentBuffer()
    for spec in specs:
        buffer.append(resolver.resolve(spec))

    buffer.flush(sys.stdout)


def _pass_undecodable_bytes(stream):
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
