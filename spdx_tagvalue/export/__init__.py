"""Tag-value export."""

from .tagvalue import (
    SerializationError,
    TagValueSerializer,
    export_tag_value,
    serialize_tag_value,
)

__all__ = [
    "SerializationError",
    "TagValueSerializer",
    "export_tag_value",
    "serialize_tag_value",
]
