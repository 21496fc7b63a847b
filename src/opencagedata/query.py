"""Query-string construction following OpenCage's escaping rules."""

import re
from collections.abc import Mapping
from urllib.parse import quote, unquote, urlencode

_WHITESPACE_RE = re.compile(r"\s")


def escape_address(address: str) -> str:
    """
    Pre-escape free-text address input the way the service expects it.

    Whitespace becomes ``+`` and commas become the literal ``%2C``,
    e.g. 'New York, NY' -> 'New+York%2C+NY'.
    """
    return _WHITESPACE_RE.sub("+", address).replace(",", "%2C")


def _stringify(value: object) -> object:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return [_stringify(item) for item in value]
    return value


def encode(params: Mapping[str, object]) -> str:
    """
    Build the ``&``-joined query string for *params*.

    Values are percent-encoded and then decoded again, so they end up
    raw in the result: tokens already escaped by the caller (``+``,
    ``%2C``) reach the service untouched. ``#`` is the one character
    re-escaped, as it would otherwise start a URL fragment. ``&`` and
    ``=`` inside values are not protected.
    """
    prepared = {key: _stringify(value) for key, value in params.items()}
    decoded = unquote(urlencode(prepared, doseq=True, quote_via=quote))
    return decoded.replace("#", "%23")
