"""Exceptions for explorer app."""


class ClipboardCopyError(Exception):
    """Raised when text could not be written to the clipboard."""

    def __init__(self, reason: str = '') -> None:
        """Initialize ClipboardCopyError.

        Args:
            reason: Why the clipboard rejected the write.
        """
        self.reason = reason
        message = 'Clipboard copy failed'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)


class MalformedClickError(Exception):
    """Raised when a click payload cannot be turned into a file record."""
