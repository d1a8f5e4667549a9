"""
Same-domain link discovery for WebArchiver.
"""
from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import urljoin, urlparse, urlunparse

from web_archiver.parser.html_parser import Document

_DEFAULT_PORTS: Dict[str, int] = {"http": 80, "https": 443}


def _canonical_netloc(scheme: str, netloc: str, port: Optional[int]) -> str:
    """Lower-case the host and drop the scheme's default port; userinfo is kept."""
    userinfo, at, hostport = netloc.rpartition("@")
    host = hostport
    if port is not None or hostport.endswith(":"):
        host = hostport[: hostport.rfind(":")]
    host = host.lower()
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return f"{userinfo}{at}{host}"


def resolve_url(href: str, base_url: str) -> str:
    """
    Resolve *href* against *base_url*.

    For http(s) URLs with a host, the host is lower-cased, the default port
    is dropped and an empty path becomes ``/``. Path, query and fragment are
    left as written. Raises ``ValueError`` for hrefs that cannot be parsed
    (bad IPv6 literal, port out of range).
    """
    absolute = urljoin(base_url, href.strip())
    parsed = urlparse(absolute)
    if parsed.scheme not in _DEFAULT_PORTS or not parsed.netloc:
        return absolute
    netloc = _canonical_netloc(parsed.scheme, parsed.netloc, parsed.port)
    return urlunparse(parsed._replace(netloc=netloc, path=parsed.path or "/"))


def _hostname(url: str) -> Optional[str]:
    return urlparse(url).hostname


def find_links(document: Document, base_url: str) -> List[str]:
    """
    Return absolute URLs of all anchors whose hostname equals that of *base_url*.

    Hrefs are resolved against the crawl's *base_url*, not against the page
    they were found on. Order follows the document; duplicates are kept.
    Malformed hrefs are dropped without logging.
    """
    base_host = _hostname(base_url)
    links: List[str] = []
    for href in document.hrefs():
        try:
            absolute = resolve_url(href, base_url)
            host = _hostname(absolute)
        except ValueError:
            continue
        if host is not None and host == base_host:
            links.append(absolute)
    return links


__all__ = ["find_links", "resolve_url"]
