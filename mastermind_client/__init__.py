"""Terminal client for a remote Mastermind server."""

__version__ = "1.0.0"
