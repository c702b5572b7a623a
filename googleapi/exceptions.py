"""Exceptions raised and returned by the googleapi support library.

This module defines the exception hierarchy used by generated API clients,
including the structured ``APIError`` built from HTTP error responses.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = (
    'APIError',
    'ConfigurationError',
    'ErrorItem',
    'GoogleAPIError',
    'InvalidReferenceError',
)


class GoogleAPIError(Exception):
    """Base exception for all googleapi errors.

    All exceptions raised by this library inherit from this class, making it
    easy to catch every library error with a single except clause.

    Example:
        try:
            url = resolve_relative(base, path)
        except GoogleAPIError as e:
            print(f'googleapi error: {e}')
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidReferenceError(GoogleAPIError, ValueError):
    """A base URL or relative reference could not be parsed.

    Generated clients bake their path templates in at generation time, so
    this signals a code generation bug. It is not meant to be caught and
    retried.

    Attributes:
        reference: The URL or reference string that failed to parse.
        reason: Explanation of why the reference is invalid.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f'failed to parse {reference!r}'
        if reason:
            message += f': {reason}'
        super().__init__(message)


class ConfigurationError(GoogleAPIError):
    """Error in configuration or in a media option value.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class ErrorItem(BaseModel):
    """A single entry of the ``errors`` array of an error response."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    reason: str = ''
    message: str = ''

    @field_validator('reason', 'message', mode='before')
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return '' if value is None else value


def _integral_floats_as_ints(value: Any) -> Any:
    """Render whole-number floats below 1e21 without a fractional part."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {k: _integral_floats_as_ints(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_ints(v) for v in value]
    return value


class APIError(GoogleAPIError):
    """Exception describing a non-2xx response from an API.

    Instances are returned by the response parsers in ``googleapi.response``;
    generated code raises them. ``str()`` of the error is safe to show to end
    users directly.

    Attributes:
        code: The HTTP status code of the response.
        message: Short server supplied message, or '' when none was decoded.
        header: Response headers, each name mapped to all of its values.
        errors: Error items decoded from the body.
        details: Opaque detail payloads decoded from the body.
        body: Raw response body text, kept even when decoding failed.
    """

    def __init__(
        self,
        code: int,
        message: str = '',
        *,
        header: dict[str, list[str]] | None = None,
        errors: list[ErrorItem] | None = None,
        details: list[Any] | None = None,
        body: str = '',
    ):
        self.code = code
        self.header = header or {}
        self.errors = list(errors or [])
        self.details = list(details or [])
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        if not self.message:
            return (
                f'googleapi: got HTTP response code {self.code} with body: {self.body}'
            )

        text = f'googleapi: Error {self.code}: {self.message}'
        if self.errors and self.errors[0].reason:
            text += f', {self.errors[0].reason}'
        if self.details:
            rendered = json.dumps(
                _integral_floats_as_ints(self.details),
                indent=2,
                sort_keys=True,
                ensure_ascii=False,
            )
            text += f'\nDetails:\n{rendered}'
        return text

    def __repr__(self) -> str:
        return f'APIError(code={self.code!r}, message={self.message!r})'
