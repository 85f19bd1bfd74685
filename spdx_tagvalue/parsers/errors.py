"""Fatal errors raised while reading tag-value text.

Every error carries the line number and the raw tag/value that triggered it,
so callers can point authors at the offending line. Value parsers raise
these without a location; the builder fills it in through ``at``.
"""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T", bound="TagValueError")


class TagValueError(Exception):
    """Base class for fatal tag-value parse errors.

    Attributes:
        reason: Description of the problem without location details.
        line_number: 1-based line of the offending tag, if known.
        tag: Raw tag name, if known.
        value: Raw value, if known.
    """

    def __init__(
        self,
        reason: str,
        line_number: Optional[int] = None,
        tag: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.line_number = line_number
        self.tag = tag
        self.value = value
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.reason
        if self.line_number is not None:
            message = f"{message} at line number {self.line_number}"
        if self.tag is not None:
            message = f"{message} ({self.tag}: {self.value if self.value is not None else ''})"
        return message

    def at(self: T, line_number: int, tag: Optional[str] = None, value: Optional[str] = None) -> T:
        """Return a copy of this error located at ``line_number``.

        Location fields already set are kept.
        """
        return type(self)(
            self.reason,
            self.line_number if self.line_number is not None else line_number,
            self.tag if self.tag is not None else tag,
            self.value if self.value is not None else value,
        )


class TagValueSyntaxError(TagValueError):
    """Malformed text: nested or unterminated quoted block."""
    pass


class SequencingError(TagValueError):
    """A tag arrived in a context where it cannot apply.

    Covers properties before their entity was opened, duplicate identifiers,
    a second namespace and a missing or ambiguous top-level subject.
    """
    pass


class TagValueFormatError(TagValueError):
    """A value does not match the grammar of its tag."""
    pass
