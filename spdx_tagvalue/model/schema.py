"""Pydantic models for the entities held in a document graph.

Every element carries its SPDX identifier plus the properties the tag-value
format can express. Links between elements (file ownership, dependencies,
snippet origin and relationships) live on the graph, not on the models.
"""

from __future__ import annotations

import copy
import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import (
    AnnotationType,
    ChecksumAlgorithm,
    FileType,
    Purpose,
    ReferenceCategory,
    RelationshipType,
)

logger = logging.getLogger("spdx_tagvalue.model.schema")

DOCUMENT_SPDX_ID = "SPDXRef-DOCUMENT"
NONE_ELEMENT = "NONE"
NOASSERTION_ELEMENT = "NOASSERTION"

# Substituted for extracted license text that the input never supplied.
MISSING_LICENSE_TEXT = "WARNING: TEXT IS REQUIRED"


# =============================================================================
# Value objects
# =============================================================================


class Checksum(BaseModel):
    """A checksum keyed by its algorithm."""

    model_config = ConfigDict(frozen=True)

    algorithm: ChecksumAlgorithm
    value: str


class Range(BaseModel):
    """Inclusive start/end pair used for snippet byte and line ranges."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"


class ExternalRef(BaseModel):
    """Pointer from a package into another ecosystem (purl, cpe, ...)."""

    category: ReferenceCategory
    reference_type: str
    locator: str
    comment: Optional[str] = None


class ExternalDocumentRef(BaseModel):
    """Reference to another SPDX document, checked by its SHA1."""

    document_ref_id: str
    uri: str
    checksum: Checksum


class PackageVerificationCode(BaseModel):
    value: str
    excluded_files: List[str] = Field(default_factory=list)


class CreationInfo(BaseModel):
    creators: List[str] = Field(default_factory=list)
    created: Optional[str] = None
    comment: Optional[str] = None
    license_list_version: Optional[str] = None


class Annotation(BaseModel):
    """Annotation on an element.

    ``spdx_ref`` names the annotated element; it is only used while the
    annotation is staged, once attached the owning element is the target.
    """

    annotator: Optional[str] = None
    date: Optional[str] = None
    comment: Optional[str] = None
    annotation_type: Optional[AnnotationType] = None
    spdx_ref: Optional[str] = None


class Relationship(BaseModel):
    source_id: str
    relationship_type: RelationshipType
    target_id: str
    comment: Optional[str] = None


# =============================================================================
# Elements
# =============================================================================


class SpdxElement(BaseModel):
    """Base for everything addressable by an SPDX identifier."""

    model_config = ConfigDict(validate_assignment=True)

    spdx_id: str
    name: Optional[str] = None
    comment: Optional[str] = None
    annotations: List[Annotation] = Field(default_factory=list)

    def copy_from(self, other: "SpdxElement") -> None:
        """Copy every property of ``other`` except its identifier and frozen fields.

        Args:
            other: Element of the same type, typically a staged one.

        Raises:
            TypeError: If ``other`` is not of the same type.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot copy {type(other).__name__} into {type(self).__name__}"
            )
        for field_name, info in type(self).model_fields.items():
            if field_name == "spdx_id" or info.frozen:
                continue
            setattr(self, field_name, copy.deepcopy(getattr(other, field_name)))


class SpdxItem(SpdxElement):
    """Element carrying license and copyright information."""

    license_concluded: Optional[str] = None
    license_comments: Optional[str] = None
    copyright_text: Optional[str] = None
    attribution_texts: List[str] = Field(default_factory=list)


def put_checksum(checksums: List[Checksum], checksum: Checksum) -> None:
    """Add ``checksum``, replacing any existing one for the same algorithm."""
    for index, existing in enumerate(checksums):
        if existing.algorithm == checksum.algorithm:
            if existing.value != checksum.value:
                logger.debug(
                    "Replacing %s checksum %s with %s",
                    checksum.algorithm.value,
                    existing.value,
                    checksum.value,
                )
            checksums[index] = checksum
            return
    checksums.append(checksum)


class Package(SpdxItem):
    version: Optional[str] = None
    package_file_name: Optional[str] = None
    supplier: Optional[str] = None
    originator: Optional[str] = None
    download_location: Optional[str] = None
    files_analyzed: bool = True
    verification_code: Optional[PackageVerificationCode] = None
    checksums: List[Checksum] = Field(default_factory=list)
    homepage: Optional[str] = None
    source_info: Optional[str] = None
    license_declared: Optional[str] = None
    license_info_from_files: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    description: Optional[str] = None
    external_refs: List[ExternalRef] = Field(default_factory=list)
    primary_package_purpose: Optional[Purpose] = None
    release_date: Optional[str] = None
    built_date: Optional[str] = None
    valid_until_date: Optional[str] = None


class File(SpdxItem):
    file_types: List[FileType] = Field(default_factory=list)
    checksums: List[Checksum] = Field(default_factory=list)
    license_info_in_file: List[str] = Field(default_factory=list)
    notice: Optional[str] = None
    contributors: List[str] = Field(default_factory=list)


class Snippet(SpdxItem):
    byte_range: Optional[Range] = None
    line_range: Optional[Range] = None
    license_info_in_snippet: List[str] = Field(default_factory=list)


class Document(SpdxElement):
    """The document itself; its namespace is fixed at construction."""

    spdx_id: str = DOCUMENT_SPDX_ID
    namespace: str = Field(frozen=True)
    spec_version: Optional[str] = None
    data_license: Optional[str] = None
    creation_info: CreationInfo = Field(default_factory=CreationInfo)
    external_document_refs: List[ExternalDocumentRef] = Field(default_factory=list)

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Document namespace must not be empty")
        return v

    def external_document_ref(self, ref_id: str) -> Optional[ExternalDocumentRef]:
        for ref in self.external_document_refs:
            if ref.document_ref_id == ref_id:
                return ref
        return None


class ExtractedLicense(BaseModel):
    """License text found in the package that is not on the license list."""

    model_config = ConfigDict(validate_assignment=True)

    license_id: str
    extracted_text: Optional[str] = None
    name: Optional[str] = None
    comment: Optional[str] = None
    see_also: List[str] = Field(default_factory=list)
