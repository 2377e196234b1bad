"""Characteristics-layer exceptions.

These are intentionally lightweight so they can be raised from compute paths
without importing pandas or the tuning runners.
"""


class MalformedInputError(ValueError):
    """Raised when a tuning result does not have the expected per-fit shape."""
