"""Exception classes for pkgverify operations."""


class PkgVerifyError(Exception):
    """Base exception for pkgverify operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional identifier or URL the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class VerificationFetchError(PkgVerifyError):
    """Raised when a remote verification source cannot be used.

    Covers transport failures, non-success HTTP statuses and payloads
    that cannot be decoded. Never escapes the verification client.
    """

    error_prefix = "Verification fetch failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        status: int | None = None,
    ) -> None:
        """Initialize fetch error.

        Args:
            message: Error message describing the failure.
            target: URL or package identifier that was requested.
            status: HTTP status code when the server answered.

        """
        super().__init__(message, target)
        self.status = status


class InvalidStateTransitionError(PkgVerifyError):
    """Raised when the resolver is asked to move between illegal states."""

    error_prefix = "Invalid resolver transition"


class ConfigurationError(PkgVerifyError):
    """Raised when logging or settings cannot be set up."""

    error_prefix = "Configuration error"
