"""
Custom exception hierarchy for yt-takeout-ingest.

Why a custom hierarchy:
- Callers can catch specific exceptions (e.g., UnsupportedFormatError vs
  SubscriptionFileNotFoundError) without relying on generic ValueError/OSError.
- Error messages are tailored to the Takeout import context, so they can be
  shown to the user who picked the file.
"""


class TakeoutIngestError(Exception):
    """Base exception for all yt-takeout-ingest errors."""


class UnsupportedFormatError(TakeoutIngestError):
    """Raised when the declared content type is not a recognized token.

    The offending token is kept on ``content_type``.
    """

    def __init__(self, content_type: str, message: str | None = None) -> None:
        self.content_type = content_type
        super().__init__(message or f"Unsupported content type: {content_type}")


class MalformedInputError(TakeoutIngestError):
    """Raised when the stream does not parse as the expected format.

    This also covers I/O errors while reading the stream (including a
    stream closed by the caller mid-read).
    """


class SubscriptionFileNotFoundError(TakeoutIngestError):
    """Raised when a ZIP archive holds none of the known subscription paths."""


class NoValidRecordsError(TakeoutIngestError):
    """Raised when a JSON export contains records, but none of them usable."""


class ConfigValidationError(TakeoutIngestError):
    """Raised when an extractor config file is empty or inconsistent."""
