"""slackit - send a single message to Slack from the command line."""

from slackit._version import __version__

__all__ = ["__version__"]
