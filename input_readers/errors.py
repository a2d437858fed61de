from __future__ import annotations


class LoadError(RuntimeError):
    """Raised when an order sheet is missing, too large or cannot be parsed.

    The message is user-facing and shown as-is by the UI and the CLI.
    """
