"""
Exceptions for one-click unsubscribe links.

Every failure raised while building or checking an ``UnsubscribeLink``
derives from ``OneClickError`` and carries the offending value so the
caller can log it.
"""

from typing import Optional


class IRIParseError(ValueError):
    """Exception raised when text cannot be parsed as an absolute IRI."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value

    def __str__(self) -> str:
        base_message = super().__str__()
        if self.value is not None:
            return f"{base_message} (value={self.value!r})"
        return base_message


class OneClickError(Exception):
    """Base class for one-click unsubscribe errors."""


class RequiresHTTPS(OneClickError):
    """The base URI does not use the https scheme."""

    def __init__(self, uri: Optional[str] = None):
        super().__init__("One-click unsubscribe requires HTTPS URI per RFC 8058 Section 3.1")
        self.uri = uri


class InvalidToken(OneClickError):
    """The opaque token is empty."""

    def __init__(self, token: str):
        super().__init__(
            f"Invalid opaque token: '{token}'. Token must be non-empty and URL-safe."
        )
        self.token = token


class InvalidURI(OneClickError):
    """The base URI joined with the token is not a valid IRI."""

    def __init__(self, uri: str):
        super().__init__(f"Invalid URI: '{uri}'. URI must be a valid HTTPS IRI.")
        self.uri = uri


class TokenMismatch(OneClickError):
    """A presented token does not match the issued one."""

    def __init__(self):
        super().__init__(
            "Token validation failed. The provided token does not match the expected value."
        )
