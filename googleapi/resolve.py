"""Resolution of templated request paths against a service base URL.

Generated clients call ``resolve_relative`` once per method, when the method
is constructed. Placeholders are carried through unexpanded; each call fills
them in later with ``googleapi.uritemplates.expand``.
"""

import logging
import re
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from googleapi.exceptions import InvalidReferenceError

__all__ = ('resolve_relative',)

logger = logging.getLogger(__name__)

_SCHEME = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*')
_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')
_CONTROL = re.compile(r'[\x00-\x1f\x7f]')

UPLOAD_PREFIX = '/upload/'


def _check_characters(reference: str) -> None:
    if _CONTROL.search(reference):
        raise InvalidReferenceError(reference, 'invalid control character in URL')
    match = _BAD_ESCAPE.search(reference)
    if match:
        raise InvalidReferenceError(
            reference, f'invalid URL escape {reference[match.start() : match.start() + 3]!r}'
        )


def _check_port(reference: str, parts: SplitResult) -> None:
    try:
        parts.port
    except ValueError as e:
        raise InvalidReferenceError(reference, str(e)) from e


def _parse_base(base: str) -> SplitResult:
    _check_characters(base)
    try:
        parts = urlsplit(base)
    except ValueError as e:
        raise InvalidReferenceError(base, str(e)) from e
    if not parts.scheme or not parts.netloc:
        raise InvalidReferenceError(base, 'base URL must be absolute')
    _check_port(base, parts)
    return parts


def _parse_reference(rel: str) -> SplitResult:
    if rel.startswith(':'):
        raise InvalidReferenceError(rel, 'missing protocol scheme')
    _check_characters(rel)
    try:
        parts = urlsplit(rel)
    except ValueError as e:
        raise InvalidReferenceError(rel, str(e)) from e
    _check_port(rel, parts)
    return parts


def _split_verb(rel: str) -> tuple[str, str]:
    """Split a ``:verb`` suffix off a relative reference.

    ``{+name}:cancel`` or ``projects:search`` must not be read as a URL with
    a scheme, so everything from the first colon is set aside. Absolute
    URLs (``scheme://...``) and network-path references keep their colons.
    """
    colon = rel.find(':')
    if colon <= 0 or rel.startswith('//'):
        return rel, ''
    if _SCHEME.fullmatch(rel[:colon]) and rel.startswith('//', colon + 1):
        return rel, ''
    return rel[:colon], rel[colon:]


def _upload_path(base_path: str, rel_path: str) -> str | None:
    """Return the path for an ``/upload/<api>/...`` reference, if it applies.

    Upload endpoints share the API's path segment with the regular ones. When
    the base path contains that segment, ``/upload`` is inserted in front of
    it and whatever the base path had before it is kept.
    """
    if not rel_path.startswith(UPLOAD_PREFIX):
        return None
    api = rel_path[len(UPLOAD_PREFIX) :].split('/', 1)[0]
    if not api:
        return None
    segments = base_path.split('/')
    if api not in segments[1:]:
        return None
    prefix = '/'.join(segments[: segments.index(api, 1)])
    return prefix + rel_path


def resolve_relative(base: str, rel: str) -> str:
    """Resolve a templated relative reference against an absolute base URL.

    Args:
        base: Absolute base URL of the service, e.g.
            ``https://www.googleapis.com/storage/v1/``.
        rel: Relative reference, possibly holding ``{name}``/``{+name}``
            placeholders and a trailing ``:verb``.

    Returns:
        The absolute URL, with placeholders left as written.

    Raises:
        InvalidReferenceError: If either argument cannot be parsed. This is
            a code generation bug, not a runtime condition.

    Example:
        >>> resolve_relative('https://www.googleapis.com/tagmanager/v2/', '{+path}:create_version')
        'https://www.googleapis.com/tagmanager/v2/{+path}:create_version'
    """
    base_parts = _parse_base(base)
    reference, verb = _split_verb(rel)
    rel_parts = _parse_reference(reference)

    resolved = urljoin(base, reference)
    if not rel_parts.scheme and not rel_parts.netloc:
        upload_path = _upload_path(base_parts.path, rel_parts.path)
        if upload_path is not None:
            logger.debug(f'Resolved upload path {upload_path} against {base}')
            resolved = urlunsplit(urlsplit(resolved)._replace(path=upload_path))

    return resolved + verb
