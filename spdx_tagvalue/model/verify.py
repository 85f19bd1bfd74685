"""Structural verification rules for document graph entities.

Each ``verify_*`` function returns a list of human-readable messages; an
empty list means the entity is valid. The rules check shape only (required
fields, identifier prefixes, checksum lengths, date formats); license
expressions are not parsed beyond spotting LicenseRef identifiers.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Optional, Set
from urllib.parse import urlparse

from .enums import (
    CHECKSUM_HEX_LENGTHS,
    LISTED_REFERENCE_TYPES,
    ChecksumAlgorithm,
    ElementKind,
)
from .schema import (
    MISSING_LICENSE_TEXT,
    Annotation,
    Checksum,
    Document,
    ExternalDocumentRef,
    ExternalRef,
    ExtractedLicense,
    File,
    Package,
    Snippet,
)

logger = logging.getLogger("spdx_tagvalue.model.verify")

DATA_LICENSE = "CC0-1.0"
MISSING_LICENSE_TEXT_MESSAGE = "Missing required license text"

SPEC_VERSION_PATTERN = re.compile(r"^SPDX-\d+\.\d+$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")
CREATOR_PATTERN = re.compile(r"^(Person|Organization|Tool):\s*\S")
ANNOTATOR_PATTERN = CREATOR_PATTERN
ACTOR_PATTERN = re.compile(r"^(Person|Organization):\s*\S")
DOCUMENT_REF_PATTERN = re.compile(r"^DocumentRef-[A-Za-z0-9.\-]+$")
LICENSE_REF_PATTERN = re.compile(r"^(DocumentRef-[A-Za-z0-9.\-]+:)?LicenseRef-[A-Za-z0-9.\-]+$")
# Local LicenseRef tokens; references into other documents are skipped.
LICENSE_REF_TOKEN = re.compile(r"(?<![:\w\-])LicenseRef-[A-Za-z0-9.\-]+")


def verify_entity(graph: Any, entity: Any) -> List[str]:
    """Dispatch to the rule set for ``entity``'s type.

    Args:
        graph: DocumentGraph owning the entity.
        entity: Entity to verify.

    Returns:
        List of verification messages.
    """
    if isinstance(entity, Document):
        return verify_document(graph, entity)
    if isinstance(entity, Package):
        return verify_package(graph, entity)
    if isinstance(entity, File):
        return verify_file(entity)
    if isinstance(entity, Snippet):
        return verify_snippet(graph, entity)
    if isinstance(entity, ExtractedLicense):
        return verify_extracted_license(entity)
    return [f"Unsupported element type {type(entity).__name__}"]


def verify_date(value: Optional[str], label: str) -> List[str]:
    if not value:
        return [f"Missing required {label}"]
    if not DATE_PATTERN.match(value):
        return [f"Invalid {label} {value}; expected YYYY-MM-DDThh:mm:ssZ"]
    return []


def verify_checksum(checksum: Checksum) -> List[str]:
    expected = CHECKSUM_HEX_LENGTHS.get(checksum.algorithm)
    if not HEX_PATTERN.match(checksum.value) or (
        expected is not None and len(checksum.value) != expected
    ):
        return [
            f"Invalid {checksum.algorithm.tag_value} checksum value {checksum.value}"
        ]
    return []


def verify_annotation(annotation: Annotation) -> List[str]:
    messages: List[str] = []
    if not annotation.annotator:
        messages.append("Missing required annotator")
    elif not ANNOTATOR_PATTERN.match(annotation.annotator):
        messages.append(f"Invalid annotator {annotation.annotator}")
    messages.extend(verify_date(annotation.date, "annotation date"))
    if annotation.comment is None:
        messages.append("Missing required annotation comment")
    if annotation.annotation_type is None:
        messages.append("Missing required annotation type")
    return messages


def verify_external_document_ref(ref: ExternalDocumentRef) -> List[str]:
    messages: List[str] = []
    if not DOCUMENT_REF_PATTERN.match(ref.document_ref_id):
        messages.append(
            f"Invalid external document reference ID {ref.document_ref_id}; "
            "must start with DocumentRef-"
        )
    if not urlparse(ref.uri).scheme:
        messages.append(f"Invalid external document URI {ref.uri}")
    if ref.checksum.algorithm != ChecksumAlgorithm.SHA1:
        messages.append(
            f"External document reference {ref.document_ref_id} must use a SHA1 checksum"
        )
    else:
        messages.extend(verify_checksum(ref.checksum))
    return messages


def verify_external_ref(ref: ExternalRef) -> List[str]:
    listed = LISTED_REFERENCE_TYPES.get(ref.category)
    if listed is not None and ref.reference_type not in listed:
        return [
            f"Invalid external reference type {ref.reference_type} "
            f"for category {ref.category.tag_value}"
        ]
    return []


def _verify_actor(value: Optional[str], label: str) -> List[str]:
    if value is None or value == "NOASSERTION" or ACTOR_PATTERN.match(value):
        return []
    return [f"Invalid {label} {value}; expected Person:, Organization: or NOASSERTION"]


def _license_refs(values: Iterable[Optional[str]]) -> Set[str]:
    refs: Set[str] = set()
    for value in values:
        if value:
            refs.update(LICENSE_REF_TOKEN.findall(value))
    return refs


def used_license_refs(graph: Any) -> Set[str]:
    """Collect every local LicenseRef used by a package, file or snippet."""
    values: List[Optional[str]] = []
    for package in graph.elements(ElementKind.PACKAGE):
        values.extend([package.license_concluded, package.license_declared])
        values.extend(package.license_info_from_files)
    for file in graph.elements(ElementKind.FILE):
        values.append(file.license_concluded)
        values.extend(file.license_info_in_file)
    for snippet in graph.elements(ElementKind.SNIPPET):
        values.append(snippet.license_concluded)
        values.extend(snippet.license_info_in_snippet)
    return _license_refs(values)


def verify_document(graph: Any, document: Document) -> List[str]:
    """Verify document-wide properties, including cross-element rules."""
    messages: List[str] = []
    if not document.spec_version:
        messages.append("Missing required SPDX version")
    elif not SPEC_VERSION_PATTERN.match(document.spec_version):
        messages.append(f"Invalid SPDX version {document.spec_version}")

    if not document.data_license:
        messages.append("Missing required data license")
    elif document.data_license != DATA_LICENSE:
        messages.append(
            f"Invalid data license {document.data_license}; expected {DATA_LICENSE}"
        )

    if not document.name:
        messages.append("Missing required document name")

    creation = document.creation_info
    if not creation.creators:
        messages.append("Missing required creators")
    for creator in creation.creators:
        if not CREATOR_PATTERN.match(creator):
            messages.append(f"Invalid creator {creator}")
    messages.extend(verify_date(creation.created, "created date"))

    for ref in document.external_document_refs:
        messages.extend(verify_external_document_ref(ref))
    for annotation in document.annotations:
        messages.extend(verify_annotation(annotation))

    if not graph.describes():
        messages.append("Document does not describe any element")

    defined = {lic.license_id for lic in graph.elements(ElementKind.EXTRACTED_LICENSE)}
    for ref in sorted(used_license_refs(graph) - defined):
        messages.append(f"License {ref} is used but not defined in the document")
    return messages


def verify_package(graph: Any, package: Package) -> List[str]:
    messages: List[str] = []
    if not package.name:
        messages.append("Missing required package name")
    if not package.download_location:
        messages.append("Missing required download location")
    for checksum in package.checksums:
        messages.extend(verify_checksum(checksum))
    if package.verification_code is not None:
        code = package.verification_code.value
        if len(code) != 40 or not HEX_PATTERN.match(code):
            messages.append(f"Invalid package verification code {code}")
    messages.extend(_verify_actor(package.supplier, "supplier"))
    messages.extend(_verify_actor(package.originator, "originator"))
    if not package.files_analyzed and graph.files_of(package.spdx_id):
        messages.append("Package contains files but FilesAnalyzed is false")
    for ref in package.external_refs:
        messages.extend(verify_external_ref(ref))
    for annotation in package.annotations:
        messages.extend(verify_annotation(annotation))
    return messages


def verify_file(file: File) -> List[str]:
    messages: List[str] = []
    if not file.name:
        messages.append("Missing required file name")
    if not any(cs.algorithm == ChecksumAlgorithm.SHA1 for cs in file.checksums):
        messages.append("Missing required SHA1 checksum")
    for checksum in file.checksums:
        messages.extend(verify_checksum(checksum))
    for annotation in file.annotations:
        messages.extend(verify_annotation(annotation))
    return messages


def verify_snippet(graph: Any, snippet: Snippet) -> List[str]:
    messages: List[str] = []
    if graph.snippet_from_file(snippet.spdx_id) is None:
        messages.append("Missing snippet from file")
    if snippet.byte_range is None:
        messages.append("Missing required byte range")
    for label, value in (("byte range", snippet.byte_range), ("line range", snippet.line_range)):
        if value is not None and value.start > value.end:
            messages.append(
                f"Invalid {label} {value}; start is greater than end"
            )
    for annotation in snippet.annotations:
        messages.extend(verify_annotation(annotation))
    return messages


def verify_extracted_license(extracted: ExtractedLicense) -> List[str]:
    messages: List[str] = []
    if not LICENSE_REF_PATTERN.match(extracted.license_id):
        messages.append(
            f"Invalid extracted license ID {extracted.license_id}; "
            "must start with LicenseRef-"
        )
    if not extracted.extracted_text or extracted.extracted_text == MISSING_LICENSE_TEXT:
        messages.append(f"{MISSING_LICENSE_TEXT_MESSAGE} for {extracted.license_id}")
    return messages
