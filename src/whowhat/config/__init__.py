"""
Configuration loading for whowhat.

Provides a loader for the optional user configuration file located in
the home directory. See :mod:`whowhat.config.loader` for implementation
details.
"""

from .loader import ConfigError, load_config  # noqa: F401
