"""
Renderers for DisplayComponents.

Both forms are a byte-exact output contract: scripts parse the JSON and
people diff the text. Field order is fixed and never depends on input.
"""

import unicodedata

from url_parts.components import DisplayComponents
from url_parts.types import OutputFormat

TEXT_HEADER = "URL Components:"

# Tabs after each label keep the values in one column.
TEXT_LABELS = {
    "scheme": "scheme\t",
    "user": "user\t\t",
    "password": "password\t",
    "host": "host\t\t",
    "port": "port\t\t",
    "path": "path\t\t",
    "fragment": "fragment\t",
    "query": "query\t\t",
}

_SIMPLE_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


# =============================================================================
# JSON STRING ESCAPING
# =============================================================================

def escape_json_string(value: str) -> str:
    """
    Escape a string for use inside a JSON string literal.

    Quote, backslash, newline, carriage return and tab get their short
    escapes; every other control character becomes \\u00XX with lowercase
    hex. Everything else, including "/" and non-ASCII text, is kept as is.
    """
    out = []
    for char in value:
        escaped = _SIMPLE_ESCAPES.get(char)
        if escaped is not None:
            out.append(escaped)
        elif unicodedata.category(char) == "Cc":
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return "".join(out)


def _json_string(value: str) -> str:
    return f'"{escape_json_string(value)}"'


# =============================================================================
# TEXT
# =============================================================================

def _text_line(field: str, value: str) -> str:
    return f"  {TEXT_LABELS[field]}: {value}"


def render_text(components: DisplayComponents) -> str:
    """Render components as aligned plain text, one line per component."""
    lines = [TEXT_HEADER, _text_line("scheme", components.scheme)]

    if components.user is not None:
        lines.append(_text_line("user", components.user))
    if components.password is not None:
        lines.append(_text_line("password", components.password))
    if components.host is not None:
        lines.append(_text_line("host", components.host))
    if components.port is not None:
        lines.append(_text_line("port", str(components.port)))

    lines.append(_text_line("path", components.path))

    if components.fragment is not None:
        lines.append(_text_line("fragment", components.fragment))

    if components.query_pairs is not None:
        lines.append(_text_line("query", components.query or ""))
        for key, value in components.query_pairs:
            lines.append(f"    {key} = {value}")

    return "\n".join(lines) + "\n"


# =============================================================================
# JSON
# =============================================================================

def render_json(components: DisplayComponents) -> str:
    """
    Render components as a single-line JSON object plus a newline.

    Absent components are left out of the object. Duplicate query keys are
    emitted as duplicate members, in order.
    """
    members = [f'"scheme":{_json_string(components.scheme)}']

    if components.user is not None:
        members.append(f'"user":{_json_string(components.user)}')
    if components.password is not None:
        members.append(f'"password":{_json_string(components.password)}')
    if components.host is not None:
        members.append(f'"host":{_json_string(components.host)}')
    if components.port is not None:
        members.append(f'"port":{components.port:d}')

    members.append(f'"path":{_json_string(components.path)}')

    if components.fragment is not None:
        members.append(f'"fragment":{_json_string(components.fragment)}')

    if components.query_pairs is not None:
        pairs = ",".join(
            f"{_json_string(key)}:{_json_string(value)}"
            for key, value in components.query_pairs
        )
        members.append(f'"query":{{{pairs}}}')

    return "{" + ",".join(members) + "}\n"


def render(components: DisplayComponents, output_format: OutputFormat) -> str:
    """Render components in the requested format."""
    if output_format is OutputFormat.JSON:
        return render_json(components)
    return render_text(components)
