"""
One-click unsubscribe links for list email (RFC 8058).

This package provides:
- ``UnsubscribeLink``: a validated HTTPS URI plus its opaque token
- Rendering of the List-Unsubscribe and List-Unsubscribe-Post headers
- Constant-time validation of tokens presented at unsubscribe time
- Helpers for the one-click POST exchange and received-header detection
"""

__version__ = '1.0.0'

from .exceptions import (
    OneClickError, RequiresHTTPS, InvalidToken, InvalidURI, TokenMismatch, IRIParseError
)
from .iri import IRI, as_iri
from .link import UnsubscribeLink, constant_time_equals
from .headers import render_headers, apply_headers, is_one_click, one_click_uris
from .post import build_one_click_request, is_one_click_body

__all__ = [
    'UnsubscribeLink',
    'IRI',
    'as_iri',
    'constant_time_equals',
    'render_headers',
    'apply_headers',
    'is_one_click',
    'one_click_uris',
    'build_one_click_request',
    'is_one_click_body',
    'OneClickError',
    'RequiresHTTPS',
    'InvalidToken',
    'InvalidURI',
    'TokenMismatch',
    'IRIParseError',
]
