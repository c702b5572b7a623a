"""Upload media options and chunk size normalization.

Resumable uploads send the media in chunks whose size must be a multiple of
``MIN_UPLOAD_CHUNK_SIZE``. Generated upload methods take a list of media
options and fold them into a ``MediaOptions`` with ``process_media_options``.

Example:
    >>> opts = process_media_options(content_type('image/png'), chunk_size(1_000_000))
    >>> opts.chunk_size
    1048576
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from googleapi.exceptions import ConfigurationError

if TYPE_CHECKING:
    from googleapi.config import ClientConfig

__all__ = (
    'DEFAULT_UPLOAD_CHUNK_SIZE',
    'MIN_UPLOAD_CHUNK_SIZE',
    'MediaOption',
    'MediaOptions',
    'chunk_retry_deadline',
    'chunk_size',
    'chunk_transfer_timeout',
    'content_type',
    'process_media_options',
    'round_chunk_size',
)

MIN_UPLOAD_CHUNK_SIZE = 256 * 1024
DEFAULT_UPLOAD_CHUNK_SIZE = 16 * 1024 * 1024


def round_chunk_size(size: int) -> int:
    """Round a chunk size up to the next multiple of ``MIN_UPLOAD_CHUNK_SIZE``.

    Zero disables chunking and is returned unchanged, as are sizes that are
    already aligned.

    Raises:
        ConfigurationError: If ``size`` is negative.
    """
    if size < 0:
        raise ConfigurationError(
            f'chunk size must not be negative, got {size}', field='chunk_size'
        )
    remainder = size % MIN_UPLOAD_CHUNK_SIZE
    if remainder:
        size += MIN_UPLOAD_CHUNK_SIZE - remainder
    return size


@dataclass
class MediaOptions:
    """Settings for a media upload.

    Attributes:
        content_type: Content type of the media; None means detect it.
        force_empty_content_type: Send no content type at all.
        chunk_size: Upload chunk size in bytes; 0 uploads in one request.
        chunk_retry_deadline: Seconds to keep retrying a failed chunk.
        chunk_transfer_timeout: Seconds allowed for one chunk; 0 is no limit.
    """

    content_type: str | None = None
    force_empty_content_type: bool = False
    chunk_size: int = DEFAULT_UPLOAD_CHUNK_SIZE
    chunk_retry_deadline: float = 32.0
    chunk_transfer_timeout: float = 0.0


class MediaOption(Protocol):
    def set_options(self, options: MediaOptions) -> None: ...


@dataclass(frozen=True)
class _ContentTypeOption:
    value: str

    def set_options(self, options: MediaOptions) -> None:
        options.content_type = self.value
        if self.value == '':
            options.force_empty_content_type = True


@dataclass(frozen=True)
class _ChunkSizeOption:
    value: int

    def set_options(self, options: MediaOptions) -> None:
        options.chunk_size = round_chunk_size(self.value)


@dataclass(frozen=True)
class _ChunkRetryDeadlineOption:
    value: float

    def set_options(self, options: MediaOptions) -> None:
        options.chunk_retry_deadline = self.value


@dataclass(frozen=True)
class _ChunkTransferTimeoutOption:
    value: float

    def set_options(self, options: MediaOptions) -> None:
        options.chunk_transfer_timeout = self.value


def content_type(ctype: str) -> MediaOption:
    """Use ``ctype`` as the media content type instead of detecting it.

    An empty string sends the media without any content type.
    """
    return _ContentTypeOption(ctype)


def chunk_size(size: int) -> MediaOption:
    """Upload in chunks of ``size`` bytes, rounded up to the minimum alignment.

    Zero uploads the whole media in a single request.
    """
    return _ChunkSizeOption(size)


def chunk_retry_deadline(seconds: float) -> MediaOption:
    return _ChunkRetryDeadlineOption(seconds)


def chunk_transfer_timeout(seconds: float) -> MediaOption:
    return _ChunkTransferTimeoutOption(seconds)


def process_media_options(
    *opts: MediaOption, config: 'ClientConfig | None' = None
) -> MediaOptions:
    """Fold media options over the defaults from ``config``."""
    if config is None:
        from googleapi.config import get_default_config

        config = get_default_config()

    options = MediaOptions(
        chunk_size=config.chunk_size,
        chunk_retry_deadline=config.chunk_retry_deadline,
        chunk_transfer_timeout=config.chunk_transfer_timeout,
    )
    for opt in opts:
        opt.set_options(options)
    return options
