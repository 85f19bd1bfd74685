"""Document model: pydantic entities held in networkx-backed document graphs."""

from .enums import (
    AnnotationType,
    ChecksumAlgorithm,
    EdgeKind,
    ElementKind,
    FileType,
    Purpose,
    ReferenceCategory,
    RelationshipType,
)
from .errors import (
    DuplicateElementError,
    DuplicateNamespaceError,
    ModelError,
    OwnershipError,
    UnknownElementError,
)
from .graph import DocumentGraph
from .schema import (
    DOCUMENT_SPDX_ID,
    MISSING_LICENSE_TEXT,
    Annotation,
    Checksum,
    CreationInfo,
    Document,
    ExternalDocumentRef,
    ExternalRef,
    ExtractedLicense,
    File,
    Package,
    PackageVerificationCode,
    Range,
    Relationship,
    Snippet,
)
from .store import ModelStore

__all__ = [
    "AnnotationType",
    "ChecksumAlgorithm",
    "EdgeKind",
    "ElementKind",
    "FileType",
    "Purpose",
    "ReferenceCategory",
    "RelationshipType",
    "DuplicateElementError",
    "DuplicateNamespaceError",
    "ModelError",
    "OwnershipError",
    "UnknownElementError",
    "DocumentGraph",
    "DOCUMENT_SPDX_ID",
    "MISSING_LICENSE_TEXT",
    "Annotation",
    "Checksum",
    "CreationInfo",
    "Document",
    "ExternalDocumentRef",
    "ExternalRef",
    "ExtractedLicense",
    "File",
    "Package",
    "PackageVerificationCode",
    "Range",
    "Relationship",
    "Snippet",
    "ModelStore",
]
