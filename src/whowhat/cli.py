"""
Command line interface for the whowhat tool.

This module defines the ``main`` function which is used as the entry
point when executing ``git whowhat``. It resolves the ``git log``
arguments, runs the history query, folds its output into groups of
files sharing the same author set, and prints the report once the whole
history has been read.
"""

from __future__ import annotations

import logging
from typing import Sequence

import click

from whowhat import __version__
from whowhat.config.loader import ConfigError, load_config
from whowhat.grouping.group_model import build_groups
from whowhat.grouping.history_parser import parse_history
from whowhat.report import render_report
from whowhat.vcs.git_client import GitClient, GitError, resolve_log_args

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
# 2 is left to click for usage errors.
EXIT_CONFIG_ERROR = 3
EXIT_VCS_FAILURE = 4

PROG_NAME = "git-whowhat"

USAGE = """\
NAME
    git-whowhat - Show authors and the files that they modified.

SYNOPSIS
    git whowhat [<options>] [<since>..<until> [[--] <path>...]

OPTIONS
    -d
        Print debugging information

    -h, --help
        Show this help message

    --verbose
        Enable verbose (debug) logging on stderr

    --version
        Show the version and exit

    [<since>..<until> [[--] <path>...]
        These are the same argument understood by git log

        If none is specified, "ORIG_HEAD.." is used as the sole argument
        (or "default_range" from ~/.git-whowhat.json)
"""


def print_error(message: str) -> None:
    """Print a fatal diagnostic on stderr."""
    click.echo(f"{PROG_NAME}: {message}", err=True)


def _show_usage(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(USAGE, nl=False)
    ctx.exit(EXIT_SUCCESS)


def collect_report(client: GitClient, args: Sequence[str]) -> str:
    """Run the history query and return the rendered report.

    Raises
    ------
    GitError
        If the query cannot be started or read.
    """
    index = parse_history(client.stream_log(args))
    groups = build_groups(index)
    logger.debug("Built %d author group(s)", len(groups))
    return render_report(groups)


@click.command(
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_usage,
    help="Show this help message and exit.",
)
@click.option("-d", "debug", is_flag=True, help="Print the git command before running it.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("revisions", nargs=-1, type=click.UNPROCESSED)
def main(debug: bool, verbose: bool, revisions: Sequence[str]) -> None:
    """Show authors and the files that they modified.

    REVISIONS are handed to ``git log`` unchanged; when none are given the
    range since the last undo point (``ORIG_HEAD..``) is used.
    """
    # force=True so repeated invocations (tests) reconfigure the handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    ctx = click.get_current_context(silent=True)

    try:
        try:
            config = load_config()
        except ConfigError as exc:
            print_error(f"configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        args = resolve_log_args(revisions, config["default_range"])
        client = GitClient(config["git"])
        if debug:
            click.echo(" ".join(client.command(args)))

        try:
            report = collect_report(client, args)
        except GitError as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        if report:
            # Bytes git emitted as-is (non UTF-8 paths or names) go back out unchanged.
            click.echo(report.encode("utf-8", "surrogateescape"), nl=False)

    except click.exceptions.Exit:
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
