"""
One-click unsubscribe link (RFC 8058).

An ``UnsubscribeLink`` pairs the HTTPS URI placed in a message's
List-Unsubscribe header with the opaque token embedded in it. The token
is generated by the caller (an HMAC of subscriber and list, for
example) and kept verbatim so a later POST to the URI can be checked
against it.

Per RFC 8058 Section 3.1 the URI MUST be HTTPS, and per Section 3.2 it
SHOULD carry a hard-to-forge component. Expiry and single use are left
to the caller.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict

from .constants import HTTPS_PREFIX, PATH_SEPARATOR
from .exceptions import IRIParseError, InvalidToken, InvalidURI, RequiresHTTPS, TokenMismatch
from .iri import IRI, as_iri
from .logging import OneClickLogger, mask_token

logger = OneClickLogger("link")


def constant_time_equals(expected: str, candidate: str) -> bool:
    """
    Compare two tokens in time that depends only on their length.

    Unequal byte lengths return early, which reveals the length and
    nothing else. Equal lengths are compared over every byte.
    """
    expected_bytes = expected.encode('utf-8')
    candidate_bytes = candidate.encode('utf-8')

    if len(expected_bytes) != len(candidate_bytes):
        return False

    result = 0
    for a, b in zip(candidate_bytes, expected_bytes):
        result |= a ^ b
    return result == 0


def compose_uri(base: str, token: str) -> str:
    """Join base URI text and token with exactly one '/' between them."""
    if base.endswith(PATH_SEPARATOR):
        return f"{base}{token}"
    return f"{base}{PATH_SEPARATOR}{token}"


@dataclass(frozen=True)
class UnsubscribeLink:
    """
    An HTTPS one-click unsubscribe URI and its opaque token.

    Build instances with ``create``. The constructor re-checks the
    scheme and token invariants and that the URI ends in ``/<token>``;
    it does not join base and token.
    """

    uri: IRI
    token: str

    def __post_init__(self):
        if not isinstance(self.uri, IRI):
            raise InvalidURI(str(self.uri))
        if not self.uri.value.startswith(HTTPS_PREFIX):
            raise RequiresHTTPS(self.uri.value)
        if not isinstance(self.token, str) or not self.token:
            raise InvalidToken(self.token)
        if not self.uri.value.endswith(PATH_SEPARATOR + self.token):
            raise InvalidURI(self.uri.value)

    @classmethod
    def create(cls, base_uri: Any, token: str) -> 'UnsubscribeLink':
        """
        Create a link from a base URI and an opaque token.

        Args:
            base_uri: Base HTTPS URI (e.g. ``https://example.com/unsubscribe``),
                as an ``IRI`` or anything ``as_iri`` accepts
            token: Non-empty, URL-safe token (e.g. base64url without padding)

        Returns:
            The validated link

        Raises:
            IRIParseError: if ``base_uri`` cannot be converted to an IRI
            RequiresHTTPS: if the base URI does not start with ``https://``
            InvalidToken: if the token is empty
            InvalidURI: if the joined URI does not parse
        """
        base = as_iri(base_uri)

        # Literal, case-sensitive prefix; HTTPS:// is rejected as well
        if not base.value.startswith(HTTPS_PREFIX):
            logger.debug("Rejected non-HTTPS base URI", {"base_uri": base.value})
            raise RequiresHTTPS(base.value)

        if not token:
            logger.debug("Rejected empty token", {"base_uri": base.value})
            raise InvalidToken(token)

        full_uri = compose_uri(base.value, token)
        try:
            uri = IRI(full_uri)
        except IRIParseError:
            logger.debug("Composed URI failed to parse", {
                "base_uri": base.value,
                "token": token,
            })
            raise InvalidURI(full_uri) from None

        return cls(uri=uri, token=token)

    def validate(self, token: str) -> bool:
        """
        Check a presented token against the issued one.

        Typically called with the token taken from the path of an
        incoming one-click POST.

        Returns:
            True if the tokens are byte-equal, False otherwise
        """
        return constant_time_equals(self.token, token)

    def verify(self, token: str) -> None:
        """
        Like ``validate``, but raise ``TokenMismatch`` instead of returning False.
        """
        if not self.validate(token):
            logger.debug("Token mismatch", {"uri_host": self.uri.host, "candidate": token})
            raise TokenMismatch()

    def headers(self) -> Dict[str, str]:
        """Return the RFC 8058 header fields for this link."""
        from .headers import render_headers
        return render_headers(self)

    def __repr__(self) -> str:
        return f"UnsubscribeLink(uri=<{self.uri.host}>, token={mask_token(self.token)!r})"

    def to_dict(self) -> Dict[str, str]:
        """Serialize field for field."""
        return {
            'uri': self.uri.value,
            'token': self.token,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UnsubscribeLink':
        """
        Rebuild a link serialized with ``to_dict``.

        Raises:
            KeyError: if a field is missing
            InvalidURI: if the stored URI no longer parses or does not
                end in the stored token
            RequiresHTTPS, InvalidToken: if the stored fields break the
                construction invariants
        """
        uri_text = data['uri']
        try:
            uri = IRI(uri_text)
        except IRIParseError:
            raise InvalidURI(uri_text) from None
        return cls(uri=uri, token=data['token'])

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> 'UnsubscribeLink':
        return cls.from_dict(json.loads(text))
