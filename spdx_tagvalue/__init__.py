"""spdx_tagvalue: SPDX tag-value parser, document graph and canonical serializer."""

from spdx_tagvalue.config import TagValueConfig, load_config
from spdx_tagvalue.export import SerializationError, TagValueSerializer, serialize_tag_value
from spdx_tagvalue.model import DocumentGraph, ModelStore
from spdx_tagvalue.parsers import (
    ParseResult,
    SequencingError,
    TagValueError,
    TagValueFormatError,
    TagValueSyntaxError,
)
from spdx_tagvalue.tagvalue_store import TagValueStore, parse_tag_value

__version__ = "0.1.0"

__all__ = [
    "TagValueConfig",
    "load_config",
    "SerializationError",
    "TagValueSerializer",
    "serialize_tag_value",
    "DocumentGraph",
    "ModelStore",
    "ParseResult",
    "SequencingError",
    "TagValueError",
    "TagValueFormatError",
    "TagValueSyntaxError",
    "TagValueStore",
    "parse_tag_value",
]
