"""Domain error types."""


class StoreError(RuntimeError):
    """Raised when the entry store rejects or drops a write."""
