"""Conversion of self-describing "variant" payloads into typed shapes.

Some APIs return polymorphic objects as plain JSON maps that carry a
``"type"`` discriminator (GeoJSON geometries, for example). Each concrete
shape is declared as a ``Variant`` subclass whose fields name the JSON keys
they read, either directly or through an explicit alias. Keys the shape does
not declare are dropped; keys the payload lacks keep the field default.

Example:
    >>> class Point(Variant):
    ...     type: str = ''
    ...     coordinates: list[float] = []
    >>> payload = {'type': 'Point', 'coordinates': [1, 2]}
    >>> variant_type(payload)
    'Point'
    >>> convert_variant(payload, Point)
    Point(type='Point', coordinates=[1.0, 2.0])
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

__all__ = ('DISCRIMINATOR', 'Variant', 'convert_variant', 'variant_type')

logger = logging.getLogger(__name__)

DISCRIMINATOR = 'type'

V = TypeVar('V', bound='Variant')


class Variant(BaseModel):
    """Base class for typed variant shapes.

    Field names (or their ``alias``) are matched against payload keys
    case-sensitively. Every field must have a default so that a payload
    missing it still converts; declaring a required field raises
    ``TypeError`` when the subclass is created.
    """

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        required = [name for name, field in cls.model_fields.items() if field.is_required()]
        if required:
            raise TypeError(
                f'{cls.__name__} fields need defaults: {", ".join(required)}'
            )


def variant_type(payload: Mapping[str, Any]) -> str:
    """Return the payload's ``"type"`` discriminator, or '' if it has none."""
    value = payload.get(DISCRIMINATOR)
    return value if isinstance(value, str) else ''


def convert_variant(payload: Mapping[str, Any], shape: type[V]) -> V | None:
    """Convert a variant payload into ``shape``.

    The payload is encoded to JSON and validated as ``shape``, so only
    JSON-representable data converts.

    Args:
        payload: The decoded JSON object.
        shape: The ``Variant`` subclass to build.

    Returns:
        The converted value, also when no field matched, or None if the
        payload is not JSON-encodable or a value does not fit its field.
    """
    try:
        encoded = json.dumps(dict(payload))
    except (TypeError, ValueError) as e:
        logger.debug(f'Variant payload is not JSON encodable: {e}')
        return None

    try:
        return shape.model_validate_json(encoded)
    except ValidationError as e:
        logger.debug(
            f'Variant payload does not convert to {shape.__name__}: {e.error_count()} errors'
        )
        return None
