"""
URL signing for digital signature authentication.

The signature is an HMAC-SHA1 of the URL's "path?query" part, keyed with the
decoded client secret, appended as a `signature` query parameter.
"""

import base64
import binascii
import hashlib
import hmac
import re
from urllib.parse import urlsplit

from .woosmap_errors import InvalidPremierConfigurationException


def decode_url_safe_base64(value: str) -> bytes:
    """
    Decode base64 written with the URL-safe alphabet ('-' and '_').

    Characters outside the alphabet are ignored and missing padding is
    restored, so only a truncated secret (one stray trailing character)
    fails to decode.
    """
    cleaned = re.sub(r"[^A-Za-z0-9+/]", "", value.translate(str.maketrans("-_", "+/")))
    return base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))


def check_secret(secret: str) -> bytes:
    """
    Decode a signing secret, rejecting one that cannot yield an HMAC key.

    Raises:
        InvalidPremierConfigurationException: If the secret is unusable
    """
    try:
        raw_key = decode_url_safe_base64(secret)
    except (binascii.Error, ValueError) as e:
        raise InvalidPremierConfigurationException(
            f"client_secret is not valid URL-safe base64: {e}"
        )
    if not raw_key:
        raise InvalidPremierConfigurationException("client_secret decodes to an empty key")
    return raw_key


def encode_url_safe_base64(value: bytes) -> str:
    """Encode bytes as base64 with the URL-safe alphabet, keeping padding."""
    return base64.b64encode(value).decode("ascii").translate(str.maketrans("+/", "-_"))


def sign_url(url: str, secret: str) -> str:
    """
    Append a signature parameter to a URL.

    Args:
        url: Complete request URL, including its query string
        secret: URL-safe base64 encoded signing key

    Returns:
        scheme://host + path?query + "&signature=" + signature

    Raises:
        InvalidPremierConfigurationException: If the secret is not valid base64
    """
    raw_key = check_secret(secret)

    parts = urlsplit(url)
    url_to_sign = f"{parts.path}?{parts.query}"

    digest = hmac.new(raw_key, url_to_sign.encode("utf-8"), hashlib.sha1).digest()
    signature = encode_url_safe_base64(digest)

    return f"{parts.scheme}://{parts.netloc}{url_to_sign}&signature={signature}".strip()
