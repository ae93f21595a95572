"""Classified errors for the transcript relay.

Every error carries a message that is safe to show to the client and the
HTTP status it maps to. Diagnostic detail (provider bodies, stack traces)
goes to the log, never into `message`.
"""


class RelayError(Exception):
    """Base class for relay errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidUrlError(RelayError):
    """URL missing or not a YouTube URL. User-correctable."""

    status_code = 400
    default_message = "Invalid YouTube URL"


class MissingCredentialError(RelayError):
    """Provider API key is not configured."""

    default_message = "API key not configured"


class ProviderError(RelayError):
    """Provider call failed or returned a non-success status."""

    default_message = "Failed to extract transcript from video"


class ProviderResponseError(ProviderError):
    """Provider answered 2xx but without a usable transcript."""

    default_message = "No transcript found in video"
