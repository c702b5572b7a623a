"""Parsing of HTTP error responses into ``APIError`` values.

Error bodies come in three shapes:

    {"error": {"message": "...", "errors": [...], "details": [...]}}
    {"error": "invalid_token", "error_description": "..."}
    [{"error": {"message": "...", ...}}]

The first that decodes wins. A body matching none of them still produces an
``APIError`` carrying the status code and the raw body text.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, BinaryIO, Union

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from googleapi.exceptions import APIError, ErrorItem

if TYPE_CHECKING:
    from googleapi.config import ClientConfig

__all__ = (
    'check_media_response',
    'check_response',
    'check_response_with_body',
    'copy_headers',
    'is_not_modified',
    'is_success',
    'parse_error',
    'parse_error_body',
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERROR_BODY_SIZE = 1 << 20

HeaderInput = Union[httpx.Headers, Mapping[str, Union[str, Iterable[str]]], None]
BodyInput = Union[bytes, bytearray, str, BinaryIO, Iterable[bytes], None]


class _ErrorPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    message: str = ''
    errors: list[ErrorItem] = []
    details: list[Any] = []

    @field_validator('message', 'errors', 'details', mode='before')
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return '' if info.field_name == 'message' else []
        return value


class _ErrorReply(BaseModel):
    model_config = ConfigDict(extra='ignore')

    error: _ErrorPayload


class _OAuthErrorReply(BaseModel):
    model_config = ConfigDict(extra='ignore')

    error: str


_JSON_LIST = TypeAdapter(list[Any])


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def copy_headers(headers: HeaderInput) -> dict[str, list[str]]:
    """Copy response headers into a name to list-of-values mapping.

    Repeated headers keep all their values in order.
    """
    copied: dict[str, list[str]] = {}
    if headers is None:
        return copied
    if isinstance(headers, httpx.Headers):
        for key, value in headers.multi_items():
            copied.setdefault(key, []).append(value)
        return copied
    for key, value in headers.items():
        if isinstance(value, str):
            copied[key] = [value]
        else:
            copied[key] = list(value)
    return copied


def _read_body(body: BodyInput) -> bytes:
    """Drain ``body`` into bytes. Streams are read exactly once."""
    if body is None:
        return b''
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode('utf-8')
    read = getattr(body, 'read', None)
    if read is not None:
        return read()
    return b''.join(body)


def _decode_payload(data: bytes) -> _ErrorPayload | None:
    """Return the structured error object of ``data``, if any shape matches."""
    try:
        return _ErrorReply.model_validate_json(data).error
    except ValidationError:
        pass

    try:
        _OAuthErrorReply.model_validate_json(data)
    except ValidationError:
        pass
    else:
        logger.debug('Error body is an OAuth style error')
        return None

    try:
        replies = _JSON_LIST.validate_json(data)
    except ValidationError:
        replies = []
    if replies:
        try:
            return _ErrorReply.model_validate(replies[0]).error
        except ValidationError:
            pass

    logger.debug('Error body did not match any known error shape')
    return None


def parse_error_body(status_code: int, headers: HeaderInput, data: bytes) -> APIError:
    """Build an ``APIError`` from a fully read error body.

    Decoding never fails: unknown shapes leave ``message`` and ``errors``
    empty and keep the raw text in ``body``.
    """
    header = copy_headers(headers)
    body = data.decode('utf-8', errors='replace')

    payload = _decode_payload(data) if data else None
    if payload is None:
        return APIError(status_code, header=header, body=body)
    return APIError(
        status_code,
        payload.message,
        header=header,
        errors=payload.errors,
        details=payload.details,
        body=body,
    )


def parse_error(
    status_code: int, headers: HeaderInput, body: BodyInput = None
) -> APIError | None:
    """Return an ``APIError`` for a non-2xx response, or None for success.

    Args:
        status_code: HTTP status code of the response.
        headers: Response headers; an ``httpx.Headers`` or a mapping of
            names to a value or a list of values.
        body: The response body as bytes or text, a binary stream, or an
            iterable of byte chunks. Streams are drained once and are not
            read at all for successful responses.

    Returns:
        None when ``status_code`` is in 200..299, otherwise the error.
    """
    if is_success(status_code):
        return None
    return parse_error_body(status_code, headers, _read_body(body))


def check_response(response: httpx.Response) -> APIError | None:
    """Check an httpx response, reading its body if it is an error.

    Example:
        >>> response = client.send(request, stream=True)
        >>> if err := check_response(response):
        ...     raise err
    """
    if is_success(response.status_code):
        return None
    return parse_error_body(response.status_code, response.headers, response.read())


def check_response_with_body(
    response: httpx.Response, body: bytes | None
) -> APIError | None:
    """Like ``check_response`` for a body the caller has already read."""
    return parse_error(response.status_code, response.headers, body)


def check_media_response(
    response: httpx.Response,
    max_body_size: int | None = None,
    config: 'ClientConfig | None' = None,
) -> APIError | None:
    """Check a media download response without decoding the body.

    At most ``max_body_size`` bytes of the body are kept on the error. When
    it is None, ``config.max_error_body_size`` applies, with ``config``
    defaulting to the environment settings.
    """
    if is_success(response.status_code):
        return None
    if max_body_size is None:
        if config is None:
            from googleapi.config import get_default_config

            config = get_default_config()
        max_body_size = config.max_error_body_size
    data = bytearray()
    for chunk in response.iter_bytes():
        data.extend(chunk)
        if len(data) >= max_body_size:
            break
    response.close()
    return APIError(
        response.status_code,
        header=copy_headers(response.headers),
        body=bytes(data[:max_body_size]).decode('utf-8', errors='replace'),
    )


def is_not_modified(err: BaseException | None) -> bool:
    """Report whether ``err`` is an ``APIError`` for HTTP 304 Not Modified."""
    return isinstance(err, APIError) and err.code == 304
