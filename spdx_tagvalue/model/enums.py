"""Enumerations shared by the document model, parser and serializer.

Enum values are the canonical Python spelling (underscores). Tag-value text
uses dashes for a few of them (``BLAKE2b-384``, ``PACKAGE-MANAGER``); use
``tag_value`` / ``from_tag_value`` to convert between the two forms.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type, TypeVar

E = TypeVar("E", bound="TagValueEnum")


class TagValueEnum(str, Enum):
    """Base for enums whose tag-value spelling swaps underscores for dashes."""

    @property
    def tag_value(self) -> str:
        return self.value.replace("_", "-")

    @classmethod
    def from_tag_value(cls: Type[E], text: str) -> Optional[E]:
        """Look up a member by its tag-value spelling.

        Dashes and underscores are interchangeable and the lookup ignores
        case. Returns None when no member matches.
        """
        key = text.strip().replace("-", "_").upper()
        lookup: Dict[str, E] = {member.value.upper(): member for member in cls}
        return lookup.get(key)


class ChecksumAlgorithm(TagValueEnum):
    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    SHA3_256 = "SHA3_256"
    SHA3_384 = "SHA3_384"
    SHA3_512 = "SHA3_512"
    MD2 = "MD2"
    MD4 = "MD4"
    MD5 = "MD5"
    MD6 = "MD6"
    BLAKE2b_256 = "BLAKE2b_256"
    BLAKE2b_384 = "BLAKE2b_384"
    BLAKE2b_512 = "BLAKE2b_512"
    BLAKE3 = "BLAKE3"
    ADLER32 = "ADLER32"


# Expected hex digest length per algorithm; MD6 and BLAKE3 are variable.
CHECKSUM_HEX_LENGTHS: Dict[ChecksumAlgorithm, int] = {
    ChecksumAlgorithm.SHA1: 40,
    ChecksumAlgorithm.SHA224: 56,
    ChecksumAlgorithm.SHA256: 64,
    ChecksumAlgorithm.SHA384: 96,
    ChecksumAlgorithm.SHA512: 128,
    ChecksumAlgorithm.SHA3_256: 64,
    ChecksumAlgorithm.SHA3_384: 96,
    ChecksumAlgorithm.SHA3_512: 128,
    ChecksumAlgorithm.MD2: 32,
    ChecksumAlgorithm.MD4: 32,
    ChecksumAlgorithm.MD5: 32,
    ChecksumAlgorithm.BLAKE2b_256: 64,
    ChecksumAlgorithm.BLAKE2b_384: 96,
    ChecksumAlgorithm.BLAKE2b_512: 128,
    ChecksumAlgorithm.ADLER32: 8,
}


class FileType(TagValueEnum):
    SOURCE = "SOURCE"
    BINARY = "BINARY"
    ARCHIVE = "ARCHIVE"
    APPLICATION = "APPLICATION"
    AUDIO = "AUDIO"
    IMAGE = "IMAGE"
    TEXT = "TEXT"
    VIDEO = "VIDEO"
    DOCUMENTATION = "DOCUMENTATION"
    SPDX = "SPDX"
    OTHER = "OTHER"


class RelationshipType(TagValueEnum):
    DESCRIBES = "DESCRIBES"
    DESCRIBED_BY = "DESCRIBED_BY"
    CONTAINS = "CONTAINS"
    CONTAINED_BY = "CONTAINED_BY"
    DEPENDS_ON = "DEPENDS_ON"
    DEPENDENCY_OF = "DEPENDENCY_OF"
    DEPENDENCY_MANIFEST_OF = "DEPENDENCY_MANIFEST_OF"
    BUILD_DEPENDENCY_OF = "BUILD_DEPENDENCY_OF"
    DEV_DEPENDENCY_OF = "DEV_DEPENDENCY_OF"
    OPTIONAL_DEPENDENCY_OF = "OPTIONAL_DEPENDENCY_OF"
    PROVIDED_DEPENDENCY_OF = "PROVIDED_DEPENDENCY_OF"
    TEST_DEPENDENCY_OF = "TEST_DEPENDENCY_OF"
    RUNTIME_DEPENDENCY_OF = "RUNTIME_DEPENDENCY_OF"
    EXAMPLE_OF = "EXAMPLE_OF"
    GENERATES = "GENERATES"
    GENERATED_FROM = "GENERATED_FROM"
    ANCESTOR_OF = "ANCESTOR_OF"
    DESCENDANT_OF = "DESCENDANT_OF"
    VARIANT_OF = "VARIANT_OF"
    DISTRIBUTION_ARTIFACT = "DISTRIBUTION_ARTIFACT"
    PATCH_FOR = "PATCH_FOR"
    PATCH_APPLIED = "PATCH_APPLIED"
    COPY_OF = "COPY_OF"
    FILE_ADDED = "FILE_ADDED"
    FILE_DELETED = "FILE_DELETED"
    FILE_MODIFIED = "FILE_MODIFIED"
    EXPANDED_FROM_ARCHIVE = "EXPANDED_FROM_ARCHIVE"
    DYNAMIC_LINK = "DYNAMIC_LINK"
    STATIC_LINK = "STATIC_LINK"
    DATA_FILE_OF = "DATA_FILE_OF"
    TEST_CASE_OF = "TEST_CASE_OF"
    BUILD_TOOL_OF = "BUILD_TOOL_OF"
    DEV_TOOL_OF = "DEV_TOOL_OF"
    TEST_OF = "TEST_OF"
    TEST_TOOL_OF = "TEST_TOOL_OF"
    DOCUMENTATION_OF = "DOCUMENTATION_OF"
    OPTIONAL_COMPONENT_OF = "OPTIONAL_COMPONENT_OF"
    METAFILE_OF = "METAFILE_OF"
    PACKAGE_OF = "PACKAGE_OF"
    AMENDS = "AMENDS"
    PREREQUISITE_FOR = "PREREQUISITE_FOR"
    HAS_PREREQUISITE = "HAS_PREREQUISITE"
    REQUIREMENT_DESCRIPTION_FOR = "REQUIREMENT_DESCRIPTION_FOR"
    SPECIFICATION_FOR = "SPECIFICATION_FOR"
    OTHER = "OTHER"

    @property
    def tag_value(self) -> str:
        # Relationship types keep their underscores in tag-value text.
        return self.value


class AnnotationType(TagValueEnum):
    REVIEW = "REVIEW"
    OTHER = "OTHER"


class ReferenceCategory(TagValueEnum):
    SECURITY = "SECURITY"
    PACKAGE_MANAGER = "PACKAGE_MANAGER"
    PERSISTENT_ID = "PERSISTENT_ID"
    OTHER = "OTHER"


# Reference types listed for each category; OTHER accepts anything.
LISTED_REFERENCE_TYPES: Dict[ReferenceCategory, frozenset] = {
    ReferenceCategory.SECURITY: frozenset(
        {"cpe22Type", "cpe23Type", "advisory", "fix", "url", "swid"}
    ),
    ReferenceCategory.PACKAGE_MANAGER: frozenset(
        {"maven-central", "npm", "nuget", "bower", "purl"}
    ),
    ReferenceCategory.PERSISTENT_ID: frozenset({"swh", "gitoid"}),
}


class Purpose(TagValueEnum):
    """Primary package purpose."""

    APPLICATION = "APPLICATION"
    FRAMEWORK = "FRAMEWORK"
    LIBRARY = "LIBRARY"
    CONTAINER = "CONTAINER"
    OPERATING_SYSTEM = "OPERATING_SYSTEM"
    DEVICE = "DEVICE"
    FIRMWARE = "FIRMWARE"
    SOURCE = "SOURCE"
    ARCHIVE = "ARCHIVE"
    FILE = "FILE"
    INSTALL = "INSTALL"
    OTHER = "OTHER"


class ElementKind(str, Enum):
    """Kinds of nodes held by a document graph."""

    DOCUMENT = "document"
    PACKAGE = "package"
    FILE = "file"
    SNIPPET = "snippet"
    EXTRACTED_LICENSE = "extracted_license"
    # Element defined in another document, addressed as DocumentRef-x:SPDXRef-y
    EXTERNAL = "external"
    # NONE / NOASSERTION relationship targets
    PSEUDO = "pseudo"


class EdgeKind(str, Enum):
    """Kinds of edges held by a document graph."""

    RELATIONSHIP = "relationship"
    HAS_FILE = "has_file"
    FILE_DEPENDENCY = "file_dependency"
    SNIPPET_FROM_FILE = "snippet_from_file"
