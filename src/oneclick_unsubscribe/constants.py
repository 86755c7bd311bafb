"""
Constants shared across the one-click unsubscribe package.

Header names and values are fixed by RFC 2369 and RFC 8058.
"""

import re
from typing import Dict, Pattern

# Header fields (RFC 2369 / RFC 8058)
LIST_UNSUBSCRIBE = "List-Unsubscribe"
LIST_UNSUBSCRIBE_POST = "List-Unsubscribe-Post"

# The single key/value pair List-Unsubscribe-Post MUST contain
ONE_CLICK_KEY = "List-Unsubscribe"
ONE_CLICK_VALUE = "One-Click"
ONE_CLICK_PAIR = f"{ONE_CLICK_KEY}={ONE_CLICK_VALUE}"

ONE_CLICK_FORM: Dict[str, str] = {ONE_CLICK_KEY: ONE_CLICK_VALUE}
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

HTTPS_PREFIX = "https://"
PATH_SEPARATOR = "/"

# Angle-bracketed URIs inside a List-Unsubscribe value
HEADER_URL_PATTERN: Pattern = re.compile(r'<([^>]+)>')

DEFAULT_USER_AGENT = "oneclick-unsubscribe/1.0"
