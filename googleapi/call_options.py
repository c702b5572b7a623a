"""Per-call options that add query parameters to a generated API call."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

__all__ = (
    'CallOption',
    'apply_call_options',
    'combine_fields',
    'query_parameter',
    'quota_user',
    'trace',
    'user_ip',
)


@dataclass(frozen=True)
class CallOption:
    """A query parameter set on a single API call.

    Attributes:
        key: Query parameter name.
        values: Values of the parameter, in order.
    """

    key: str
    values: tuple[str, ...]

    def get(self) -> tuple[str, str]:
        return self.key, ','.join(self.values)


def quota_user(user: str) -> CallOption:
    """Attribute quota to ``user``, an arbitrary string of up to 40 characters.

    Overrides ``user_ip`` when both are given.
    """
    return CallOption('quotaUser', (user,))


def user_ip(ip: str) -> CallOption:
    """Attribute quota to the end user at ``ip`` for server-side calls."""
    return CallOption('userIp', (ip,))


def trace(token: str) -> CallOption:
    return CallOption('trace', (f'token:{token}',))


def query_parameter(key: str, *values: str) -> CallOption:
    return CallOption(key, tuple(values))


def apply_call_options(
    params: Mapping[str, list[str]] | None, *opts: CallOption
) -> dict[str, list[str]]:
    """Return a copy of ``params`` with each option's parameter set.

    A later option for the same key replaces an earlier one.
    """
    merged = {key: list(values) for key, values in (params or {}).items()}
    for opt in opts:
        merged[opt.key] = list(opt.values)
    return merged


def combine_fields(fields: Iterable[str]) -> str:
    """Join partial response field selectors into one ``fields`` value."""
    return ','.join(fields)
