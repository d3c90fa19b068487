"""
Component extraction - decide which URL parts are shown.

Three states are kept apart for every optional field: absent (None),
present but empty ("" or an empty tuple), and present with a value.
"""

from dataclasses import dataclass

from url_parts.parser import ParsedUrl

QueryPairs = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class DisplayComponents:
    """Presence-resolved view of a parsed URL, ready for rendering."""

    scheme: str
    user: str | None
    password: str | None
    host: str | None
    port: int | None
    path: str
    fragment: str | None
    query: str | None  # raw query text, shown on the text-mode label line
    query_pairs: QueryPairs | None


def extract(parsed: ParsedUrl) -> DisplayComponents:
    """Project a ParsedUrl onto the components to display."""
    query_pairs: QueryPairs | None = None
    if parsed.query is not None:
        query_pairs = tuple(parsed.query_pairs())

    return DisplayComponents(
        scheme=parsed.scheme,
        # An empty username means "no userinfo", not an empty user
        user=parsed.username or None,
        password=parsed.password,
        host=parsed.host,
        port=parsed.port,
        path=parsed.path,
        fragment=parsed.fragment,
        query=parsed.query,
        query_pairs=query_pairs,
    )
