"""URI template expansion for request paths.

Implements the subset of RFC 6570 used by generated clients: simple
``{name}`` expansion and reserved ``{+name}`` expansion. Values are
percent-encoded byte-wise from their UTF-8 form with uppercase hex digits.

Example:
    >>> expand('/storage/v1/b/{bucket}/o/{+object}', {'bucket': 'my b', 'object': 'a/b'})
    '/storage/v1/b/my%20b/o/a/b'
"""

from collections.abc import Mapping
from urllib.parse import urlsplit, urlunsplit

__all__ = ('RESERVED', 'UNRESERVED', 'escape', 'expand', 'expand_url')

UNRESERVED = frozenset(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~'
)
RESERVED = frozenset(":/?#[]@!$&'()*+,;=")

# Literal template text keeps its reserved characters and existing escapes.
_LITERAL_SAFE = UNRESERVED | RESERVED | {'%'}


def _encode(value: str, safe: frozenset[str]) -> str:
    parts = []
    for char in value:
        if char in safe:
            parts.append(char)
        else:
            parts.extend(f'%{byte:02X}' for byte in char.encode('utf-8'))
    return ''.join(parts)


def escape(value: str, allow_reserved: bool = False) -> str:
    """Percent-encode a template value.

    Args:
        value: The raw value to encode.
        allow_reserved: Leave RFC 3986 reserved characters (including ``/``)
            unescaped, as ``{+name}`` expansion requires.

    Returns:
        The encoded value. Unreserved ASCII characters are never escaped.
    """
    return _encode(value, UNRESERVED | RESERVED if allow_reserved else UNRESERVED)


def _expand_placeholder(body: str, values: Mapping[str, str]) -> str:
    if body.startswith('+'):
        return escape(values.get(body[1:], ''), allow_reserved=True)
    return escape(values.get(body, ''))


def expand(template: str, values: Mapping[str, str]) -> str:
    """Expand the ``{name}`` and ``{+name}`` placeholders of a path template.

    Keys missing from ``values`` expand to an empty string. A ``{`` that is
    not closed before the next ``{`` or the end of the template is literal
    text and comes out as ``%7B``.

    Args:
        template: The path template.
        values: Placeholder name to replacement value.

    Returns:
        The expanded, percent-encoded path.
    """
    out = []
    pos = 0
    length = len(template)
    while pos < length:
        start = template.find('{', pos)
        if start < 0:
            out.append(_encode(template[pos:], _LITERAL_SAFE))
            break
        out.append(_encode(template[pos:start], _LITERAL_SAFE))

        end = start + 1
        while end < length and template[end] not in '{}':
            end += 1

        if end < length and template[end] == '}':
            out.append(_expand_placeholder(template[start + 1 : end], values))
            pos = end + 1
        else:
            # unterminated, resume at the next '{' or the end
            out.append('%7B')
            out.append(_encode(template[start + 1 : end], _LITERAL_SAFE))
            pos = end
    return ''.join(out)


def expand_url(url: str, values: Mapping[str, str]) -> str:
    """Expand the path component of a templated URL.

    Scheme, host, query and fragment are returned unchanged.
    """
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=expand(parts.path, values)))
