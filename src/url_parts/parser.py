"""
URL parser adapter.

Wraps urllib.parse so the rest of the package sees one ParsedUrl value with
the presence rules the renderer relies on: a query or fragment that is
present but empty is reported as "", an absent one as None.

Architecture: Functional core
- Data: Scheme tables, ParsedUrl
- Pure functions: Validation and normalization
"""

import logging
import re
from dataclasses import dataclass, replace
from urllib.parse import SplitResult, parse_qsl, quote, urlsplit

from url_parts.errors import UrlParseError

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION (Data)
# =============================================================================

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Schemes with an authority and a non-opaque path. "file" may omit the host.
SPECIAL_SCHEMES = frozenset(DEFAULT_PORTS) | {"file"}

FORBIDDEN_HOST_CHARS = frozenset("<>^|\\")

# Stripped from both ends before parsing: C0 controls and space.
_C0_CONTROL_OR_SPACE = "".join(chr(i) for i in range(0x21))

# Removed anywhere in the URL.
_DROP_TAB_AND_NEWLINE = str.maketrans("", "", "\t\n\r")

_SCHEME_PREFIX = re.compile(r"([A-Za-z][A-Za-z0-9+.-]*):")

# Kept verbatim in userinfo, path, query and fragment. Spaces, controls,
# '"', '<', '>' and non-ASCII characters are percent-encoded.
_COMPONENT_SAFE = "".join(chr(i) for i in range(0x21, 0x7F) if chr(i) not in '"<>')

# Opaque paths ("data:text/plain,hello world") only encode controls and non-ASCII.
_OPAQUE_PATH_SAFE = "".join(chr(i) for i in range(0x20, 0x7F))


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================

@dataclass(frozen=True)
class ParsedUrl:
    """A successfully parsed URL."""

    scheme: str
    username: str  # "" when there is no userinfo
    password: str | None
    host: str | None
    port: int | None  # None when absent or equal to the scheme's default
    path: str
    fragment: str | None
    query: str | None

    def query_pairs(self) -> list[tuple[str, str]]:
        """Decode the query as form-encoded pairs, in order, duplicates kept."""
        if self.query is None:
            return []
        return parse_qsl(self.query, keep_blank_values=True)


# =============================================================================
# PURE FUNCTIONS (Logic)
# =============================================================================

def _normalize(text: str) -> str:
    """Strip the ends, drop tabs and newlines, and turn backslashes into slashes for special schemes."""
    text = text.strip(_C0_CONTROL_OR_SPACE).translate(_DROP_TAB_AND_NEWLINE)

    match = _SCHEME_PREFIX.match(text)
    if match is None or match.group(1).lower() not in SPECIAL_SCHEMES:
        return text

    end = min((i for i in (text.find("?"), text.find("#")) if i != -1), default=len(text))
    return text[:end].replace("\\", "/") + text[end:]


def _has_ip_literal(text: str) -> bool:
    authority = text.partition("//")[2]
    for delimiter in "/?#":
        authority = authority.partition(delimiter)[0]
    return authority.rpartition("@")[2].startswith("[")


def _split(text: str) -> SplitResult:
    try:
        return urlsplit(text)
    except ValueError as exc:
        logger.debug("urlsplit rejected the URL: %s", exc)
        if _has_ip_literal(text):
            raise UrlParseError("invalid IPv6 address") from exc
        raise UrlParseError("invalid domain character") from exc


def _encode(value: str, safe: str = _COMPONENT_SAFE) -> str:
    return quote(value, safe=safe, errors="surrogateescape")


def _extract_host(parts: SplitResult) -> str | None:
    hostname = parts.hostname
    if not hostname:
        return None
    for char in hostname:
        if char in FORBIDDEN_HOST_CHARS or char.isspace() or not char.isprintable():
            raise UrlParseError("invalid domain character")
    if ":" in hostname:
        return f"[{hostname}]"
    return hostname


def _extract_port(parts: SplitResult) -> int | None:
    try:
        port = parts.port
    except ValueError as exc:
        raise UrlParseError("invalid port number") from exc

    if port is not None and DEFAULT_PORTS.get(parts.scheme) == port:
        return None
    return port


def _extract_path(parts: SplitResult) -> str:
    path = parts.path
    if parts.scheme in SPECIAL_SCHEMES:
        return _encode(path) or "/"
    if not parts.netloc and not path.startswith("/"):
        # Opaque path, e.g. "mailto:" or "data:"
        return _encode(path, safe=_OPAQUE_PATH_SAFE)
    return _encode(path)


def parse_url(text: str) -> ParsedUrl:
    """
    Parse an absolute URL.

    Spaces, controls and non-ASCII characters outside the host are
    percent-encoded. Raises UrlParseError with a short description if the
    text is not a URL.
    """
    text = _normalize(text)
    parts = _split(text)

    if not parts.scheme:
        raise UrlParseError("relative URL without a base")

    host = _extract_host(parts)
    if host is None and parts.scheme in DEFAULT_PORTS:
        raise UrlParseError("empty host")

    port = _extract_port(parts)

    # urlsplit reports "" for both "no query" and "empty query"
    before_fragment, has_fragment, _ = text.partition("#")
    has_query = "?" in before_fragment

    password = parts.password
    parsed = ParsedUrl(
        scheme=parts.scheme,
        username=_encode(parts.username or ""),
        password=_encode(password) if password is not None else None,
        host=host,
        port=port,
        path=_extract_path(parts),
        fragment=_encode(parts.fragment) if has_fragment else None,
        query=_encode(parts.query) if has_query else None,
    )

    masked = parsed if parsed.password is None else replace(parsed, password="***")
    logger.debug("Parsed URL as %s", masked)
    return parsed
