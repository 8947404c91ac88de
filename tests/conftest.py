import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_user_config(tmp_path: Path, monkeypatch):
    """Point the user-level configuration file at an empty temporary home.

    Tests must not pick up a ``~/.git-whowhat.json`` from the machine running
    them. Tests that need a configuration file can write to the returned path.
    """
    config_path = tmp_path / "home" / ".git-whowhat.json"
    monkeypatch.setattr("whowhat.config.loader._get_config_path", lambda: config_path)
    return config_path


@pytest.fixture(autouse=True)
def drop_closed_log_handlers():
    """Remove root handlers left behind by CLI runs.

    The CLI configures logging against the stderr of a ``CliRunner``
    isolation context, which is closed once the invocation returns.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        stream = getattr(handler, "stream", None)
        if stream is not None and getattr(stream, "closed", False):
            root.removeHandler(handler)
