"""Tag-value reading: tokenizer, builder and deferred resolver."""

from .builder import Context, ParseResult, TagValueBuilder
from .errors import (
    SequencingError,
    TagValueError,
    TagValueFormatError,
    TagValueSyntaxError,
)
from .resolver import DEFAULT_DESCRIBES_COMMENT, DeferredResolver, DeferredTables
from .tokenizer import LineTokenizer, TagValueBehavior, TagValuePair

__all__ = [
    "Context",
    "ParseResult",
    "TagValueBuilder",
    "SequencingError",
    "TagValueError",
    "TagValueFormatError",
    "TagValueSyntaxError",
    "DEFAULT_DESCRIBES_COMMENT",
    "DeferredResolver",
    "DeferredTables",
    "LineTokenizer",
    "TagValueBehavior",
    "TagValuePair",
]
