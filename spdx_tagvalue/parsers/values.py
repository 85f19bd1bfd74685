"""Value normalization and the line-anchored grammars of structured values.

Each ``parse_*`` function takes an already normalized value and either
returns a model object or raises TagValueFormatError. The errors carry no
location; the builder attaches line number and tag.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple, Type, TypeVar

from spdx_tagvalue.model.enums import (
    ChecksumAlgorithm,
    FileType,
    ReferenceCategory,
    RelationshipType,
    TagValueEnum,
)
from spdx_tagvalue.model.schema import (
    Checksum,
    ExternalDocumentRef,
    ExternalRef,
    PackageVerificationCode,
    Range,
)

from .errors import TagValueFormatError

E = TypeVar("E", bound=TagValueEnum)

TEXT_START = "<text>"
TEXT_END = "</text>"
NON_BREAKING_SPACE = "\u00a0"

EXTERNAL_DOCUMENT_REF_PATTERN = re.compile(r"^(\S+)\s+(\S+)\s+SHA1:\s*(\S+)")
RELATIONSHIP_PATTERN = re.compile(r"^(\S+)\s+(\S+)\s+(\S+)")
CHECKSUM_PATTERN = re.compile(r"^([A-Za-z0-9\-_]+)(?::|\s)\s*(\S+)")
RANGE_PATTERN = re.compile(r"^(\d+):(\d+)$")
EXTERNAL_REF_PATTERN = re.compile(r"^(\S+)\s+(\S+)\s+(.+)$")
VERIFICATION_CODE_PATTERN = re.compile(r"^(\S+)(?:\s*\(\s*excludes:\s*(.*)\))?\s*$")
SPEC_VERSION_PATTERN = re.compile(r"^SPDX-(\d+)\.(\d+)")


def normalize_value(value: str) -> str:
    """Strip encoding artifacts and quote-block markers from a raw value."""
    value = value.replace(NON_BREAKING_SPACE, " ")
    value = value.replace(TEXT_START, "").replace(TEXT_END, "")
    return value.strip()


def parse_enum(enum_type: Type[E], value: str, label: str) -> E:
    """Resolve ``value`` to a member of ``enum_type``.

    Raises:
        TagValueFormatError: If no member matches.
    """
    member = enum_type.from_tag_value(value)
    if member is None:
        raise TagValueFormatError(f"Unknown {label} {value}")
    return member


def parse_checksum(value: str) -> Checksum:
    """Parse ``<ALGORITHM>: <hex>``; dashes in the algorithm map to underscores."""
    match = CHECKSUM_PATTERN.match(value)
    if not match:
        raise TagValueFormatError(f"Invalid checksum {value}")
    algorithm = parse_enum(ChecksumAlgorithm, match.group(1), "checksum algorithm")
    return Checksum(algorithm=algorithm, value=match.group(2))


def parse_relationship(value: str) -> Tuple[str, RelationshipType, str]:
    """Parse ``<sourceId> <TYPE> <targetId>``; the type is case-insensitive."""
    match = RELATIONSHIP_PATTERN.match(value)
    if not match:
        raise TagValueFormatError(f"Invalid relationship {value}")
    relationship_type = RelationshipType.from_tag_value(match.group(2).upper())
    if relationship_type is None:
        raise TagValueFormatError(f"Unknown relationship type {match.group(2)}")
    return match.group(1), relationship_type, match.group(3)


def parse_external_ref(value: str) -> ExternalRef:
    """Parse ``<category> <type> <locator>``."""
    match = EXTERNAL_REF_PATTERN.match(value)
    if not match:
        raise TagValueFormatError(f"Invalid external reference {value}")
    category = parse_enum(ReferenceCategory, match.group(1), "external reference category")
    return ExternalRef(
        category=category,
        reference_type=match.group(2),
        locator=match.group(3).strip(),
    )


def parse_external_document_ref(value: str) -> ExternalDocumentRef:
    """Parse ``<refId> <uri> SHA1: <hex>``."""
    match = EXTERNAL_DOCUMENT_REF_PATTERN.match(value)
    if not match:
        raise TagValueFormatError(f"Invalid external document reference {value}")
    return ExternalDocumentRef(
        document_ref_id=match.group(1),
        uri=match.group(2),
        checksum=Checksum(algorithm=ChecksumAlgorithm.SHA1, value=match.group(3)),
    )


def parse_range(value: str) -> Range:
    """Parse ``<start>:<end>`` where both are non-negative integers."""
    match = RANGE_PATTERN.match(value.strip())
    if not match:
        raise TagValueFormatError(f"Invalid range {value}; expected <start>:<end>")
    return Range(start=int(match.group(1)), end=int(match.group(2)))


def parse_bool(value: str) -> bool:
    """Accept ``true``/``false`` in any case; anything else is an error."""
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise TagValueFormatError(f"Invalid boolean value {value}; expected true or false")


def parse_verification_code(value: str) -> PackageVerificationCode:
    """Parse ``<hex> (excludes: name1, name2)``; the excludes part is optional."""
    match = VERIFICATION_CODE_PATTERN.match(value)
    if not match:
        raise TagValueFormatError(f"Invalid package verification code {value}")
    excluded: List[str] = []
    if match.group(2):
        excluded = [name.strip() for name in match.group(2).split(",") if name.strip()]
    return PackageVerificationCode(value=match.group(1), excluded_files=excluded)


def parse_file_type(value: str) -> Tuple[FileType, bool]:
    """Resolve a file type.

    Returns:
        Tuple of the file type and whether the input was not upper-cased.

    Raises:
        TagValueFormatError: If the value is not a known file type.
    """
    file_type = parse_enum(FileType, value, "file type")
    return file_type, value != file_type.value


def split_list(value: str) -> List[str]:
    """Split a comma-separated value, dropping empty entries."""
    return [item.strip() for item in value.split(",") if item.strip()]


def spec_version_tuple(version: Optional[str]) -> Optional[Tuple[int, int]]:
    """Return ``(major, minor)`` for ``SPDX-M.N`` or None if unparseable."""
    if not version:
        return None
    match = SPEC_VERSION_PATTERN.match(version)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))
