"""googleapi - runtime support for generated HTTP API clients.

Generated clients use this package to build request URLs from path templates,
to turn error responses into exceptions, to convert polymorphic "variant"
payloads into typed models and to configure media uploads.

Quick Start:
    >>> from googleapi import check_response, expand_url, resolve_relative
    >>>
    >>> url = resolve_relative('https://storage.googleapis.com/storage/v1/', 'b/{bucket}/o')
    >>> expand_url(url, {'bucket': 'my-bucket'})
    'https://storage.googleapis.com/storage/v1/b/my-bucket/o'
    >>>
    >>> response = httpx.get(url)
    >>> if err := check_response(response):
    ...     raise err

CLI Usage:
    $ googleapi expand '/b/{bucket}/o' -v bucket=my-bucket
    $ googleapi resolve https://www.googleapis.com/tagmanager/v2/ '{+path}:create_version'
    $ googleapi check 404 body.json
"""

from googleapi._version import version as __version__
from googleapi.call_options import (
    CallOption,
    apply_call_options,
    combine_fields,
    query_parameter,
    quota_user,
    trace,
    user_ip,
)
from googleapi.config import ClientConfig, default_headers, get_config
from googleapi.exceptions import (
    APIError,
    ConfigurationError,
    ErrorItem,
    GoogleAPIError,
    InvalidReferenceError,
)
from googleapi.media import (
    DEFAULT_UPLOAD_CHUNK_SIZE,
    MIN_UPLOAD_CHUNK_SIZE,
    MediaOptions,
    chunk_retry_deadline,
    chunk_size,
    chunk_transfer_timeout,
    content_type,
    process_media_options,
    round_chunk_size,
)
from googleapi.resolve import resolve_relative
from googleapi.response import (
    check_media_response,
    check_response,
    check_response_with_body,
    is_not_modified,
    parse_error,
)
from googleapi.uritemplates import escape, expand, expand_url
from googleapi.variant import Variant, convert_variant, variant_type

__all__ = [
    '__version__',
    # URL construction
    'expand',
    'expand_url',
    'escape',
    'resolve_relative',
    # Error responses
    'parse_error',
    'check_response',
    'check_response_with_body',
    'check_media_response',
    'is_not_modified',
    # Variants
    'Variant',
    'variant_type',
    'convert_variant',
    # Media uploads
    'MIN_UPLOAD_CHUNK_SIZE',
    'DEFAULT_UPLOAD_CHUNK_SIZE',
    'MediaOptions',
    'round_chunk_size',
    'content_type',
    'chunk_size',
    'chunk_retry_deadline',
    'chunk_transfer_timeout',
    'process_media_options',
    # Call options
    'CallOption',
    'quota_user',
    'user_ip',
    'trace',
    'query_parameter',
    'apply_call_options',
    'combine_fields',
    # Configuration
    'ClientConfig',
    'get_config',
    'default_headers',
    # Exceptions
    'GoogleAPIError',
    'APIError',
    'ErrorItem',
    'InvalidReferenceError',
    'ConfigurationError',
]
