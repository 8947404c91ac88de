"""
Git client implementation for whowhat.

This module wraps the single Git operation the report needs: a
``git log`` history query that prints one author header line per commit
followed by the names of the files that commit touched. The query runs
as a child process whose standard output is streamed line by line to
the caller while its standard error is relayed, unmodified, to our own
standard error by a background thread.
"""

from __future__ import annotations

import io
import logging
import subprocess
import sys
import threading
from typing import BinaryIO, Iterator, List, Optional, Sequence


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# Marker prefixed to every per-commit header line; the remainder of the
# line is the author's display name.
AUTHOR_MARKER = "  WHO:"
LOG_FORMAT = "--format=" + AUTHOR_MARKER + "%an"
NAME_ONLY = "--name-only"
# Everything since the last recorded undo point (reset, merge, rebase...).
DEFAULT_RANGE = "ORIG_HEAD.."

# Upper bound, in seconds, spent waiting for the stderr relay once the
# child has exited.
RELAY_JOIN_TIMEOUT = 1.0


class GitError(Exception):
    """Raised when the history query cannot be started or read."""

    pass


def resolve_log_args(revisions: Sequence[str], default_range: str = DEFAULT_RANGE) -> List[str]:
    """Build the ``git`` argument list for the history query.

    Parameters
    ----------
    revisions : Sequence[str]
        Positional arguments given on the command line. They are passed
        through verbatim and may hold a revision range and path filters.
    default_range : str, optional
        Range used when ``revisions`` is empty.

    Returns
    -------
    List[str]
        Arguments to place after the ``git`` executable.
    """
    args = ["log", LOG_FORMAT, NAME_ONLY]
    if revisions:
        args.extend(revisions)
    else:
        args.append(default_range)
    return args


def relay_stream(source: BinaryIO, sink: BinaryIO) -> None:
    """Copy ``source`` to ``sink`` line by line until end of file.

    Each line is written as raw bytes and flushed immediately. I/O errors
    are logged and end the relay without propagating: losing part of
    git's diagnostics must never abort the report.
    """
    try:
        for line in iter(source.readline, b""):
            sink.write(line)
            sink.flush()
    except (OSError, ValueError) as exc:
        logger.error("Failed to relay git error output: %s", exc)


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class GitClient:
    """Client for running the history query against a Git repository."""

    def __init__(
        self,
        git: str = "git",
        error_sink: Optional[BinaryIO] = None,
    ) -> None:
        self.git = git
        self.error_sink = error_sink

    def command(self, args: Sequence[str]) -> List[str]:
        """Return the full command line for ``args``."""
        return [self.git] + list(args)

    def _error_sink(self) -> BinaryIO:
        if self.error_sink is not None:
            return self.error_sink
        # Resolved per call so redirected streams (e.g. under test
        # runners) are honoured.
        return getattr(sys.stderr, "buffer", sys.stderr)

    def stream_log(self, args: Sequence[str]) -> Iterator[str]:
        """Run ``git`` with ``args`` and yield its output one line at a time.

        Line terminators are stripped. Bytes that are not valid UTF-8 are
        kept as lone surrogates (``surrogateescape``) so distinct paths stay
        distinct; encode with the same handler to get the original bytes
        back. The child's standard error is copied
        to our standard error concurrently, so a chatty child cannot block
        on a full pipe while we consume its output.

        Raises
        ------
        GitError
            If the child process cannot be started or its output cannot
            be read.
        """
        full_cmd = self.command(args)
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            proc = subprocess.Popen(
                full_cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            logger.error("Could not start %s: %s", full_cmd[0], exc)
            raise GitError(f"failed to run {full_cmd[0]}: {exc}") from exc

        relay = threading.Thread(
            target=relay_stream,
            args=(proc.stderr, self._error_sink()),
            name="git-stderr-relay",
            daemon=True,
        )
        relay.start()

        stdout = io.TextIOWrapper(proc.stdout, encoding="utf-8", errors="surrogateescape", newline="\n")
        try:
            for line in stdout:
                yield _chomp(line)
        except OSError as exc:
            logger.error("Failed to read git output: %s", exc)
            raise GitError(f"failed to read output of {full_cmd[0]}: {exc}") from exc
        finally:
            stdout.close()
            returncode = proc.wait()
            relay.join(RELAY_JOIN_TIMEOUT)
            if not relay.is_alive():
                proc.stderr.close()
            logger.debug("Git command exited with status %s", returncode)
