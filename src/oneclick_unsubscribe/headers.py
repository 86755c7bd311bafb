"""
List-Unsubscribe header fields for one-click links.

Rendering side (sender):
- ``render_headers`` produces the two fields RFC 8058 Section 3.1 requires
- ``apply_headers`` writes them onto an ``email.message.Message``

Detection side (receiver):
- ``is_one_click`` and ``one_click_uris`` inspect received headers the
  way a mail client decides whether to offer a one-click button
"""

from email.message import Message
from typing import Dict, List, Mapping, Optional

from .constants import (
    LIST_UNSUBSCRIBE, LIST_UNSUBSCRIBE_POST, ONE_CLICK_PAIR,
    HEADER_URL_PATTERN, HTTPS_PREFIX
)
from .link import UnsubscribeLink


def render_headers(link: UnsubscribeLink) -> Dict[str, str]:
    """
    Render a link as RFC 8058 email header fields.

    Returns:
        {"List-Unsubscribe": "<URI>", "List-Unsubscribe-Post": "List-Unsubscribe=One-Click"}
    """
    return {
        LIST_UNSUBSCRIBE: f"<{link.uri.value}>",
        LIST_UNSUBSCRIBE_POST: ONE_CLICK_PAIR,
    }


def apply_headers(message: Message, link: UnsubscribeLink) -> Message:
    """Set both header fields on a message, replacing any existing ones."""
    for name, value in render_headers(link).items():
        del message[name]
        message[name] = value
    return message


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def one_click_uris(headers: Mapping[str, str]) -> List[str]:
    """
    Return the HTTPS URIs a one-click POST may be sent to.

    Empty unless List-Unsubscribe-Post holds exactly List-Unsubscribe=One-Click.
    """
    post_value = _get_header(headers, LIST_UNSUBSCRIBE_POST)
    if not post_value or post_value.strip() != ONE_CLICK_PAIR:
        return []

    unsubscribe_value = _get_header(headers, LIST_UNSUBSCRIBE) or ''
    return [
        uri.strip()
        for uri in HEADER_URL_PATTERN.findall(unsubscribe_value)
        if uri.strip().startswith(HTTPS_PREFIX)
    ]


def is_one_click(headers: Mapping[str, str]) -> bool:
    """Check whether received headers advertise one-click unsubscribe."""
    return bool(one_click_uris(headers))
