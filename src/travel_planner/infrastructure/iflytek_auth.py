"""Signed connection URLs for the iFlytek WebSocket APIs."""

import base64
import hashlib
import hmac
from email.utils import formatdate
from urllib.parse import urlencode


def http_date() -> str:
    """Current UTC time as an RFC 7231 HTTP-date."""
    return formatdate(usegmt=True)


def build_auth_url(
    host: str,
    path: str,
    api_key: str,
    api_secret: str,
    date: str | None = None,
    method: str = "GET",
) -> str:
    """
    Builds a ``wss://`` URL carrying the HMAC-SHA256 request signature.

    The vendor recomputes the signature from ``host``, ``date`` and the request
    line, so every separator below is significant. The URL is only accepted
    within the vendor's clock-skew window and must be rebuilt for each session.

    Args:
        host: Vendor host, e.g. ``iat-api.xfyun.cn``.
        path: Request path, e.g. ``/v2/iat``.
        api_key: Console API key.
        api_secret: Console API secret, the HMAC key.
        date: HTTP-date to sign; the current time when omitted.
        method: Request method in the signed request line.

    Returns:
        The signed URL with ``authorization``, ``date`` and ``host`` parameters.
    """
    date = date or http_date()
    signature_origin = f"host: {host}\ndate: {date}\n{method} {path} HTTP/1.1"

    digest = hmac.new(
        api_secret.encode("utf-8"),
        signature_origin.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    signature = base64.b64encode(digest).decode("utf-8")

    authorization_origin = (
        f'api_key="{api_key}", algorithm="hmac-sha256", '
        f'headers="host date request-line", signature="{signature}"'
    )
    authorization = base64.b64encode(authorization_origin.encode("utf-8")).decode(
        "utf-8"
    )

    query = urlencode({"authorization": authorization, "date": date, "host": host})
    return f"wss://{host}{path}?{query}"
