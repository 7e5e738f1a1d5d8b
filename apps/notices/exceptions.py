from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a notice is configured with an unsupported value."""
