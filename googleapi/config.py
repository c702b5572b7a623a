"""Library settings for generated clients.

Settings come from, in order of precedence: an explicit YAML or JSON file,
``googleapi.yaml``/``googleapi.yml`` in the working directory, the
``[tool.googleapi]`` table of ``pyproject.toml``, and finally ``GOOGLEAPI_*``
environment variables and the built-in defaults.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from googleapi._version import version
from googleapi.exceptions import ConfigurationError
from googleapi.media import DEFAULT_UPLOAD_CHUNK_SIZE, round_chunk_size
from googleapi.response import DEFAULT_MAX_ERROR_BODY_SIZE

__all__ = (
    'ClientConfig',
    'default_headers',
    'get_config',
    'get_default_config',
    'load_json',
    'load_yaml',
)

logger = logging.getLogger(__name__)

DEFAULT_FILENAMES = ['googleapi.yaml', 'googleapi.yml']
USER_AGENT = f'google-api-python-support/{version}'


class ClientConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='GOOGLEAPI_', extra='ignore')

    user_agent: str = Field(
        USER_AGENT, description='User-Agent sent by generated clients.'
    )

    chunk_size: int = Field(
        DEFAULT_UPLOAD_CHUNK_SIZE,
        description='Default upload chunk size in bytes, 0 disables chunking.',
    )

    chunk_retry_deadline: float = Field(
        32.0, ge=0, description='Seconds to keep retrying a failed upload chunk.'
    )

    chunk_transfer_timeout: float = Field(
        0.0, ge=0, description='Seconds allowed per upload chunk, 0 for no limit.'
    )

    max_error_body_size: int = Field(
        DEFAULT_MAX_ERROR_BODY_SIZE,
        gt=0,
        description='Bytes of a media error body kept on the error.',
    )

    @field_validator('chunk_size')
    @classmethod
    def _align_chunk_size(cls, value: int) -> int:
        if value < 0:
            raise ValueError('chunk size must not be negative')
        return round_chunk_size(value)


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _validate(data: dict, source: str | None) -> ClientConfig:
    try:
        return ClientConfig(**data)
    except ValidationError as e:
        fields = ', '.join(str(err['loc'][0]) for err in e.errors() if err['loc'])
        raise ConfigurationError(
            f'Invalid configuration: {e.error_count()} errors',
            config_path=source,
            field=fields or None,
        ) from e


def _load_file(path: Path) -> ClientConfig:
    if not path.exists():
        raise ConfigurationError('Configuration file not found', config_path=str(path))
    if path.suffix == '.json':
        data = load_json(path)
    else:
        data = load_yaml(path)
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', config_path=str(path))
    logger.debug(f'Loaded configuration from {path}')
    return _validate(data, str(path))


def get_default_config() -> ClientConfig:
    """Return settings from the environment and the built-in defaults."""
    return _validate({}, None)


def get_config(path: str | None = None) -> ClientConfig:
    """Load configuration from a file, falling back to environment defaults."""
    if path:
        return _load_file(Path(path))

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return _load_file(candidate)

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if 'googleapi' in tools:
            logger.debug(f'Loaded configuration from {pyproject_path}')
            return _validate(tools['googleapi'], str(pyproject_path))

    return get_default_config()


def default_headers(config: ClientConfig | None = None) -> dict[str, str]:
    """Return the headers generated clients send with every request.

    Example:
        >>> client = httpx.Client(headers=default_headers())
    """
    if config is None:
        config = get_default_config()
    return {'User-Agent': config.user_agent}
