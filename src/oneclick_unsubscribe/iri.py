"""
Minimal absolute-IRI value type.

The one-click link treats its URI as an already validated, opaque value:
something that can be parsed from text and rendered back to text. This
module supplies that abstraction on top of ``urllib.parse``. It checks
what RFC 3987 excludes outright (whitespace, controls, the unwise
delimiters, broken percent-escapes) and requires a scheme; it does not
normalize.
"""

import re
import urllib.parse
from dataclasses import dataclass
from typing import Any

from .exceptions import IRIParseError

_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')
_EXCLUDED_PATTERN = re.compile(r'[\x00-\x20\x7f-\x9f<>"{}|\\^`]')
_BAD_ESCAPE_PATTERN = re.compile(r'%(?![0-9A-Fa-f]{2})')


@dataclass(frozen=True)
class IRI:
    """An absolute IRI held in its textual form."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise IRIParseError("IRI must be text", repr(self.value))
        if not self.value:
            raise IRIParseError("IRI is empty", self.value)
        if not _SCHEME_PATTERN.match(self.value):
            raise IRIParseError("IRI has no scheme", self.value)

        excluded = _EXCLUDED_PATTERN.search(self.value)
        if excluded:
            raise IRIParseError(
                f"IRI contains excluded character {excluded.group()!r}", self.value
            )
        if _BAD_ESCAPE_PATTERN.search(self.value):
            raise IRIParseError("IRI contains a malformed percent-escape", self.value)

        try:
            urllib.parse.urlsplit(self.value)
        except ValueError as e:
            raise IRIParseError(f"IRI could not be parsed: {e}", self.value) from e

    def __str__(self) -> str:
        return self.value

    @property
    def scheme(self) -> str:
        return urllib.parse.urlsplit(self.value).scheme

    @property
    def host(self) -> str:
        return urllib.parse.urlsplit(self.value).hostname or ''

    @property
    def path(self) -> str:
        return urllib.parse.urlsplit(self.value).path


def as_iri(value: Any) -> IRI:
    """
    Convert an IRI-representable value into an ``IRI``.

    Accepts an ``IRI`` (returned as is), text, a ``urllib.parse`` split or
    parse result, or any object whose ``iri`` attribute is an ``IRI`` or text.

    Raises:
        IRIParseError: if the value cannot be converted.
    """
    if isinstance(value, IRI):
        return value
    if isinstance(value, str):
        return IRI(value)
    if isinstance(value, (urllib.parse.SplitResult, urllib.parse.ParseResult)):
        return IRI(value.geturl())

    iri = getattr(value, 'iri', None)
    if isinstance(iri, (IRI, str)):
        return as_iri(iri)

    raise IRIParseError(f"Cannot convert {type(value).__name__} to IRI")
