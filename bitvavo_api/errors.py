"""Exceptions raised by the Bitvavo client.

Every failure surfaced to callers is a ``BitvavoError``. Transport exceptions
raised by ccxt are translated once, in ``translate_error``, so callers never
need to import ccxt to handle failures.
"""

import json
from typing import Any

import ccxt


class BitvavoError(Exception):
    """Base class for all errors raised by this library."""


class BitvavoTransportError(BitvavoError):
    """The request could not be completed (network, timeout, HTTP failure)."""


class BitvavoDecodeError(BitvavoError):
    """The response did not have the expected shape."""


class BitvavoApiError(BitvavoError):
    """The exchange answered with an error body.

    Attributes:
        code: Bitvavo ``errorCode`` (None when the exchange sent none)
        message: Bitvavo ``error`` text
    """

    def __init__(self, code: int | None, message: str):
        self.code = code
        self.message = message
        super().__init__(f"bitvavo: {code}: {message}")


class BitvavoAuthenticationError(BitvavoApiError):
    """Credentials are missing, invalid, or the signature was rejected."""


class BitvavoRateLimitError(BitvavoApiError):
    """The exchange reported that the rate limit was exceeded."""


def parse_error_body(text: str) -> tuple[int | None, str]:
    """Extract ``(errorCode, error)`` from a transport error message.

    ccxt embeds the raw response body in its exception message, e.g.
    ``bitvavo {"errorCode":205,"error":"market parameter is invalid."}``.

    Returns:
        (code, message); code is None when no error body could be found
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None, text

    try:
        body: Any = json.loads(text[start:end + 1])
    except ValueError:
        return None, text

    if not isinstance(body, dict) or "errorCode" not in body:
        return None, text

    try:
        code = int(body["errorCode"])
    except (TypeError, ValueError):
        return None, text

    return code, str(body.get("error", ""))


def translate_error(exc: ccxt.BaseError) -> BitvavoError:
    """Map a ccxt exception onto the Bitvavo error taxonomy."""
    code, message = parse_error_body(str(exc))

    if isinstance(exc, ccxt.AuthenticationError):
        return BitvavoAuthenticationError(code, message)
    if isinstance(exc, (ccxt.RateLimitExceeded, ccxt.DDoSProtection)):
        return BitvavoRateLimitError(code, message)
    if code is not None:
        return BitvavoApiError(code, message)
    return BitvavoTransportError(str(exc))
