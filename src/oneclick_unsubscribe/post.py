"""
The one-click POST exchange (RFC 8058 Section 3.1).

A mail client unsubscribes by POSTing the single form field
``List-Unsubscribe=One-Click`` to the link URI. The request must not
carry cookies, HTTP authorization or other context.

Sending is left to the caller: ``build_one_click_request`` returns an
unsent ``requests.Request`` that can be prepared and sent with any
session, and ``is_one_click_body`` checks what a server received.
"""

import urllib.parse
from typing import Any, Mapping, Union

import requests

from .constants import (
    ONE_CLICK_FORM, ONE_CLICK_KEY, ONE_CLICK_VALUE, FORM_CONTENT_TYPE, DEFAULT_USER_AGENT
)
from .link import UnsubscribeLink


def build_one_click_request(
    link: UnsubscribeLink,
    user_agent: str = DEFAULT_USER_AGENT
) -> requests.Request:
    """
    Build the POST a mail client sends to unsubscribe.

    Args:
        link: Link taken from the message headers
        user_agent: User-Agent header value

    Returns:
        Unsent request with a form-encoded body and no cookies or auth
    """
    return requests.Request(
        method='POST',
        url=link.uri.value,
        headers={
            'User-Agent': user_agent,
            'Content-Type': FORM_CONTENT_TYPE,
        },
        data=dict(ONE_CLICK_FORM),
        cookies={},
        auth=None,
    )


def is_one_click_body(body: Union[Mapping[str, Any], str, bytes]) -> bool:
    """
    Check that a received POST body is exactly List-Unsubscribe=One-Click.

    RFC 8058 prefers multipart/form-data. Raw bodies are only understood
    when urlencoded; parse a multipart body with the web framework first
    and pass the resulting field mapping.

    Args:
        body: Parsed form fields (urlencoded or multipart), or the raw
            application/x-www-form-urlencoded body

    Returns:
        True if the body holds the single one-click field
    """
    if isinstance(body, bytes):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError:
            return False

    if isinstance(body, str):
        fields = urllib.parse.parse_qs(body.strip(), keep_blank_values=True)
    else:
        fields = dict(body)

    if set(fields) != {ONE_CLICK_KEY}:
        return False

    value = fields[ONE_CLICK_KEY]
    if isinstance(value, (list, tuple)):
        return list(value) == [ONE_CLICK_VALUE]
    return value == ONE_CLICK_VALUE
