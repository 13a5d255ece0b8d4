from typing import Optional


class BrandingPreferenceMgtException(Exception):
    """Base error for branding preference management.

    Carries a resolved human-readable message, a stable error code and an
    optional underlying cause, which is also chained as ``__cause__``.
    """

    def __init__(self, message: str, code: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.code:
            return f"{self.code} - {self.message}"
        return self.message


class BrandingPreferenceMgtClientException(BrandingPreferenceMgtException):
    """Raised when the caller supplied an invalid branding preference request."""


class BrandingPreferenceMgtServerException(BrandingPreferenceMgtException):
    """Raised when processing a branding preference fails internally."""
