"""Custom exception types for the package-scan wire types.

Every error raised by this package is local and synchronous. Structural
decode failures are not wrapped: they surface as `pydantic.ValidationError`.
"""

from __future__ import annotations


class ScanTypesError(Exception):
    """Base exception for wire-type conversion errors."""

    pass


class UnknownEcosystem(ScanTypesError, ValueError):
    """
    Raised when a free-text registry/ecosystem string matches no known alias.

    The offending string is kept verbatim in `value` for diagnostics.
    """

    def __init__(self, value: str, message: str | None = None):
        """
        Initialize UnknownEcosystem.

        Args:
            value: The registry string that failed to parse
            message: Optional override for the error message
        """
        self.value = value
        super().__init__(message or f"Unknown package ecosystem: {value!r}")


class UnsupportedPackageType(ScanTypesError, ValueError):
    """
    Raised converting from the package-URL type vocabulary when the purl
    type has no equivalent `PackageType`.
    """

    def __init__(self, purl_type: str):
        self.purl_type = purl_type
        super().__init__(f"Unsupported package URL type: {purl_type!r}")


class InvalidPackageUrl(ScanTypesError, ValueError):
    """Raised when a package-URL string cannot describe a single package version."""

    def __init__(self, purl: str, reason: str):
        self.purl = purl
        self.reason = reason
        super().__init__(f"Invalid package URL {purl!r}. Reason: {reason}")


class WrongJobStatusKind(ScanTypesError):
    """Raised when a job status is accessed as the arm it did not decode to."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Job status decoded as {actual}, not {expected}")
