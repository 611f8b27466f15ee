"""Single-page HTTP fetcher for the audit.

Every URL, including each redirect hop, must be a public http(s) address.
The body is capped at :data:`MAX_CONTENT_SIZE` both by the declared
``Content-Length`` and by the bytes actually received.
"""

import ipaddress
import logging
import socket
from typing import Iterator, Optional, Union
from urllib.parse import urljoin, urlparse

import httpx

logger = logging.getLogger(__name__)

MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
TIMEOUT = 10  # seconds
MAX_REDIRECTS = 10
ALLOWED_SCHEMES = {"http", "https"}
USER_AGENT = "Mozilla/5.0 (compatible; SEOPreviewBot/1.0; SEO audit & social preview)"
_REQUEST_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

_TOO_LARGE = "Response body exceeds the maximum allowed size."


IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _resolved_addresses(hostname: str) -> Iterator[IPAddress]:
    try:
        infos = socket.getaddrinfo(hostname, None)
    except (socket.gaierror, UnicodeError):
        # Unresolvable here; the request itself will report the failure
        return
    for *_, sockaddr in infos:
        # "fe80::1%eth0" -> "fe80::1"
        try:
            yield ipaddress.ip_address(sockaddr[0].split("%")[0])
        except ValueError:
            continue


def _is_internal(hostname: str) -> bool:
    return any(
        addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved
        for addr in _resolved_addresses(hostname)
    )


def validate_url(url: str) -> None:
    """Raise ValueError unless *url* is an http(s) URL pointing at a public host."""
    parsed = urlparse(url)
    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")
    if not parsed.hostname:
        raise ValueError("URL must have a valid hostname.")
    if _is_internal(parsed.hostname):
        raise ValueError("Requests to private/internal addresses are not allowed.")


def _declared_size(response: httpx.Response) -> Optional[int]:
    value = response.headers.get("content-length")
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring malformed Content-Length %r from %s", value, response.url)
        return None


async def _read_text(response: httpx.Response) -> str:
    declared = _declared_size(response)
    if declared is not None and declared > MAX_CONTENT_SIZE:
        raise RuntimeError(_TOO_LARGE)

    body = bytearray()
    async for chunk in response.aiter_bytes():
        body.extend(chunk)
        if len(body) > MAX_CONTENT_SIZE:
            raise RuntimeError(_TOO_LARGE)

    try:
        return body.decode(response.charset_encoding or "utf-8", errors="replace")
    except LookupError:
        # Unknown charset declared by the server
        return body.decode(errors="replace")


async def fetch_url(url: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """Fetch *url* and return the decoded response body.

    Redirects are followed by hand so each hop goes through
    :func:`validate_url` before it is requested.  *transport* replaces the
    network layer (used by the tests).

    Raises:
        ValueError: if the URL, or a redirect target, is not allowed or cannot
            be requested at all.
        httpx.HTTPError: on network errors or a non-2xx response.
        RuntimeError: if the body is too large or there are too many redirects.
    """
    validate_url(url)

    current_url = url
    async with httpx.AsyncClient(
        follow_redirects=False, timeout=TIMEOUT, headers=_REQUEST_HEADERS, transport=transport
    ) as client:
        for _ in range(MAX_REDIRECTS + 1):
            try:
                async with client.stream("GET", current_url) as response:
                    if not response.is_redirect:
                        response.raise_for_status()
                        return await _read_text(response)
                    next_url = urljoin(current_url, response.headers.get("location", ""))
            except httpx.InvalidURL as exc:
                # Not an HTTPError subclass; httpx refuses to build the request
                raise ValueError(f"Invalid URL: {exc}") from exc

            validate_url(next_url)
            logger.info("Following redirect %s -> %s", current_url, next_url)
            current_url = next_url

    raise RuntimeError("Too many redirects.")
