"""Canonical tag-value export for document graphs.

The traversal order is fixed so that the same graph always produces the
same text, and re-parsing that text yields an equivalent graph:

document header, external document references, creation information,
document annotations and relationships, document-level files, snippets,
packages (each followed by its files) and extracted licenses.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from spdx_tagvalue.config.schema import SerializeConfig
from spdx_tagvalue.model.enums import ElementKind, RelationshipType
from spdx_tagvalue.model.graph import DocumentGraph, entity_type
from spdx_tagvalue.model.schema import (
    DOCUMENT_SPDX_ID,
    NOASSERTION_ELEMENT,
    NONE_ELEMENT,
    Annotation,
    Checksum,
    Document,
    ExtractedLicense,
    File,
    Package,
    Relationship,
    Snippet,
    SpdxElement,
)
from spdx_tagvalue.parsers import tags as t
from spdx_tagvalue.parsers.values import TEXT_END, TEXT_START

logger = logging.getLogger("spdx_tagvalue.export.tagvalue")

UNWRAPPED_COPYRIGHT = {NONE_ELEMENT, NOASSERTION_ELEMENT}
BLOCK_KINDS = {ElementKind.PACKAGE, ElementKind.FILE, ElementKind.SNIPPET}


class SerializationError(Exception):
    """The graph cannot be expressed as tag-value text."""
    pass


def _checksum(checksum: Checksum) -> str:
    return f"{checksum.algorithm.tag_value}: {checksum.value}"


def _sorted_checksums(checksums: Iterable[Checksum]) -> List[Checksum]:
    return sorted(checksums, key=lambda cs: (cs.algorithm.value, cs.value))


class TagValueSerializer:
    """Write one document graph as canonical tag-value text."""

    def __init__(self, graph: DocumentGraph, config: Optional[SerializeConfig] = None) -> None:
        self.graph = graph
        self.config = config or SerializeConfig()
        self._lines: List[str] = []

    # ------------------------------------------------------------------
    # Line helpers
    # ------------------------------------------------------------------

    def _line(self, tag: str, value: Optional[str]) -> None:
        if value is None:
            return
        if "\n" in value:
            self._text(tag, value)
        else:
            self._lines.append(f"{tag}: {value}")

    def _text(self, tag: str, value: Optional[str]) -> None:
        if value is None:
            return
        self._lines.append(f"{tag}: {TEXT_START}{value}{TEXT_END}")

    def _copyright(self, tag: str, value: Optional[str]) -> None:
        if value in UNWRAPPED_COPYRIGHT:
            self._line(tag, value)
        else:
            self._text(tag, value)

    def _each(self, tag: str, values: Iterable[str], wrap: bool = False) -> None:
        for value in sorted(values):
            if wrap:
                self._text(tag, value)
            else:
                self._line(tag, value)

    def _section(self, title: str) -> None:
        if self._lines:
            self._lines.append("")
        if self.config.section_headers:
            self._lines.append(f"## {title}")

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """Return the document as tag-value text.

        Raises:
            SerializationError: If the graph holds an element of an
                unsupported kind or an element the format cannot express.
        """
        self._check_structure()
        self._lines = []
        document = self.graph.document

        self._header(document)
        self._external_document_refs(document)
        self._creation_info(document)
        self._document_links(document)

        for file in self._document_files():
            self._section("File Information")
            self._file(file)
        for snippet in self._snippets():
            self._section("Snippet Information")
            self._snippet(snippet)
        for package in self._packages():
            self._section("Package Information")
            self._package(package)
        licenses = sorted(
            self.graph.elements(ElementKind.EXTRACTED_LICENSE), key=lambda lic: lic.license_id
        )
        if licenses:
            self._section("Extracted Licenses")
            for extracted in licenses:
                self._extracted_license(extracted)

        self._lines.append("")
        return "\n".join(self._lines)

    def to_bytes(self) -> bytes:
        return self.serialize().encode(self.config.encoding)

    def _check_structure(self) -> None:
        for node_id, attrs in self.graph.graph.nodes(data=True):
            kind = attrs.get("kind")
            entity = attrs.get("entity")
            if kind in (ElementKind.EXTERNAL, ElementKind.PSEUDO):
                continue
            if kind == ElementKind.DOCUMENT:
                expected = Document
            elif isinstance(kind, ElementKind):
                expected = entity_type(kind)
            else:
                raise SerializationError(f"Element {node_id} has unsupported kind {kind!r}")
            if not isinstance(entity, expected):
                raise SerializationError(
                    f"Element {node_id} of kind {kind.value} holds "
                    f"{type(entity).__name__}, expected {expected.__name__}"
                )
            if isinstance(entity, (Package, File)) and not entity.name:
                raise SerializationError(
                    f"{type(entity).__name__} {node_id} has no name and cannot be written"
                )

    # ------------------------------------------------------------------
    # Document sections
    # ------------------------------------------------------------------

    def _header(self, document: Document) -> None:
        self._section("Document Information")
        self._line(t.SPDX_VERSION, document.spec_version)
        self._line(t.DATA_LICENSE, document.data_license)
        self._line(t.DOCUMENT_NAMESPACE, document.namespace)
        self._line(t.DOCUMENT_NAME, document.name)
        self._line(t.SPDX_ID, DOCUMENT_SPDX_ID)
        self._text(t.DOCUMENT_COMMENT, document.comment)

    def _external_document_refs(self, document: Document) -> None:
        refs = sorted(document.external_document_refs, key=lambda r: r.document_ref_id)
        if not refs:
            return
        self._section("External Document References")
        for ref in refs:
            self._line(
                t.EXTERNAL_DOCUMENT_REF,
                f"{ref.document_ref_id} {ref.uri} {_checksum(ref.checksum)}",
            )

    def _creation_info(self, document: Document) -> None:
        creation = document.creation_info
        self._section("Creation Information")
        self._each(t.CREATOR, creation.creators)
        self._line(t.CREATED, creation.created)
        self._text(t.CREATOR_COMMENT, creation.comment)
        self._line(t.LICENSE_LIST_VERSION, creation.license_list_version)

    def _document_links(self, document: Document) -> None:
        if document.annotations:
            self._section("Annotations")
            self._annotations(DOCUMENT_SPDX_ID, document.annotations)
        # Only packages, files and snippets own a block; every other source is
        # written here.
        sources = [DOCUMENT_SPDX_ID] + sorted(
            node_id
            for node_id, attrs in self.graph.graph.nodes(data=True)
            if attrs["kind"] not in BLOCK_KINDS and node_id != DOCUMENT_SPDX_ID
        )
        if any(self.graph.relationships_of(source) for source in sources):
            self._section("Relationships")
            for source in sources:
                self._relationships(source)

    # ------------------------------------------------------------------
    # Traversal order
    # ------------------------------------------------------------------

    def _described(self, kind: ElementKind) -> List[str]:
        seen: List[str] = []
        for element_id in self.graph.describes():
            if self.graph.kind_of(element_id) == kind and element_id not in seen:
                seen.append(element_id)
        return seen

    @staticmethod
    def _by_name(elements: Sequence[SpdxElement]) -> List[SpdxElement]:
        return sorted(elements, key=lambda e: (e.name or "", e.spdx_id))

    def _document_files(self) -> List[File]:
        standalone = [
            file
            for file in self.graph.elements(ElementKind.FILE)
            if self.graph.package_of(file.spdx_id) is None
        ]
        described_ids = set(self._described(ElementKind.FILE))
        described = [f for f in standalone if f.spdx_id in described_ids]
        rest = [f for f in standalone if f.spdx_id not in described_ids]
        return self._by_name(described) + self._by_name(rest)

    def _snippets(self) -> List[Snippet]:
        snippets = self.graph.elements(ElementKind.SNIPPET)
        described_ids = set(self._described(ElementKind.SNIPPET))
        described = sorted(
            (s for s in snippets if s.spdx_id in described_ids), key=lambda s: s.spdx_id
        )
        rest = sorted(
            (s for s in snippets if s.spdx_id not in described_ids), key=lambda s: s.spdx_id
        )
        return described + rest

    def _packages(self) -> List[Package]:
        described_ids = self._described(ElementKind.PACKAGE)
        described = [self.graph.get_entity(pid) for pid in described_ids]
        rest = [
            p for p in self.graph.elements(ElementKind.PACKAGE) if p.spdx_id not in described_ids
        ]
        return described + self._by_name(rest)

    # ------------------------------------------------------------------
    # Element blocks
    # ------------------------------------------------------------------

    def _annotations(self, element_id: str, annotations: Iterable[Annotation]) -> None:
        ordered = sorted(
            annotations,
            key=lambda a: (a.date or "", a.annotator or "", a.comment or ""),
        )
        for annotation in ordered:
            self._line(t.ANNOTATOR, annotation.annotator)
            self._line(t.ANNOTATION_DATE, annotation.date)
            self._text(t.ANNOTATION_COMMENT, annotation.comment)
            if annotation.annotation_type is not None:
                self._line(t.ANNOTATION_TYPE, annotation.annotation_type.tag_value)
            self._line(t.ANNOTATION_SPDX_REF, element_id)

    def _relationships(self, element_id: str) -> None:
        relationships = self.graph.relationships_of(element_id)
        ordered: List[Relationship] = []
        rest = relationships
        if element_id == DOCUMENT_SPDX_ID:
            # Described elements are emitted in describes order, so DESCRIBES
            # lines keep declaration order for a re-parse to see the same one.
            describes = RelationshipType.DESCRIBES
            ordered = [r for r in relationships if r.relationship_type == describes]
            rest = [r for r in relationships if r.relationship_type != describes]
        ordered += sorted(
            rest,
            key=lambda r: (r.relationship_type.value, r.target_id, r.comment or ""),
        )
        for rel in ordered:
            self._line(
                t.RELATIONSHIP,
                f"{rel.source_id} {rel.relationship_type.tag_value} {rel.target_id}",
            )
            self._text(t.RELATIONSHIP_COMMENT, rel.comment)

    def _links(self, element: SpdxElement) -> None:
        self._annotations(element.spdx_id, element.annotations)
        self._relationships(element.spdx_id)

    def _package(self, package: Package) -> None:
        self._line(t.PACKAGE_NAME, package.name)
        self._line(t.SPDX_ID, package.spdx_id)
        self._text(t.PACKAGE_COMMENT, package.comment)
        self._line(t.PACKAGE_VERSION, package.version)
        self._line(t.PACKAGE_FILE_NAME, package.package_file_name)
        self._line(t.PACKAGE_SUPPLIER, package.supplier)
        self._line(t.PACKAGE_ORIGINATOR, package.originator)
        self._line(t.PACKAGE_DOWNLOAD_LOCATION, package.download_location)
        if not package.files_analyzed:
            self._line(t.FILES_ANALYZED, "false")
        if package.primary_package_purpose is not None:
            self._line(t.PRIMARY_PACKAGE_PURPOSE, package.primary_package_purpose.tag_value)
        self._line(t.RELEASE_DATE, package.release_date)
        self._line(t.BUILT_DATE, package.built_date)
        self._line(t.VALID_UNTIL_DATE, package.valid_until_date)
        code = package.verification_code
        if code is not None:
            value = code.value
            if code.excluded_files:
                value = f"{value} (excludes: {', '.join(sorted(code.excluded_files))})"
            self._line(t.PACKAGE_VERIFICATION_CODE, value)
        for checksum in _sorted_checksums(package.checksums):
            self._line(t.PACKAGE_CHECKSUM, _checksum(checksum))
        self._line(t.PACKAGE_HOMEPAGE, package.homepage)
        self._text(t.PACKAGE_SOURCE_INFO, package.source_info)
        self._line(t.PACKAGE_LICENSE_CONCLUDED, package.license_concluded)
        self._each(t.PACKAGE_LICENSE_INFO_FROM_FILES, package.license_info_from_files)
        self._line(t.PACKAGE_LICENSE_DECLARED, package.license_declared)
        self._text(t.PACKAGE_LICENSE_COMMENTS, package.license_comments)
        self._copyright(t.PACKAGE_COPYRIGHT_TEXT, package.copyright_text)
        self._text(t.PACKAGE_SUMMARY, package.summary)
        self._text(t.PACKAGE_DESCRIPTION, package.description)
        self._each(t.PACKAGE_ATTRIBUTION_TEXT, package.attribution_texts, wrap=True)
        refs = sorted(
            package.external_refs,
            key=lambda r: (r.category.value, r.reference_type, r.locator),
        )
        for ref in refs:
            self._line(
                t.EXTERNAL_REF,
                f"{ref.category.tag_value} {ref.reference_type} {ref.locator}",
            )
            self._text(t.EXTERNAL_REF_COMMENT, ref.comment)
        self._links(package)

        for file in self._by_name(self.graph.files_of(package.spdx_id)):
            self._lines.append("")
            self._file(file)

    def _file(self, file: File) -> None:
        self._line(t.FILE_NAME, file.name)
        self._line(t.SPDX_ID, file.spdx_id)
        self._text(t.FILE_COMMENT, file.comment)
        for file_type in sorted(file.file_types, key=lambda ft: ft.value):
            self._line(t.FILE_TYPE, file_type.tag_value)
        for checksum in _sorted_checksums(file.checksums):
            self._line(t.FILE_CHECKSUM, _checksum(checksum))
        self._line(t.FILE_LICENSE_CONCLUDED, file.license_concluded)
        self._each(t.FILE_LICENSE_INFO, file.license_info_in_file)
        self._text(t.FILE_LICENSE_COMMENTS, file.license_comments)
        self._copyright(t.FILE_COPYRIGHT_TEXT, file.copyright_text)
        self._text(t.FILE_NOTICE, file.notice)
        self._each(t.FILE_ATTRIBUTION_TEXT, file.attribution_texts, wrap=True)
        self._each(t.FILE_CONTRIBUTOR, file.contributors)
        self._each(
            t.FILE_DEPENDENCY,
            {dep.name for dep in self.graph.dependencies_of(file.spdx_id) if dep.name},
        )
        self._links(file)

    def _snippet(self, snippet: Snippet) -> None:
        self._line(t.SNIPPET_SPDX_ID, snippet.spdx_id)
        from_file = self.graph.snippet_from_file(snippet.spdx_id)
        if from_file is not None:
            self._line(t.SNIPPET_FROM_FILE_ID, from_file.spdx_id)
        if snippet.byte_range is not None:
            self._line(t.SNIPPET_BYTE_RANGE, str(snippet.byte_range))
        if snippet.line_range is not None:
            self._line(t.SNIPPET_LINE_RANGE, str(snippet.line_range))
        self._line(t.SNIPPET_LICENSE_CONCLUDED, snippet.license_concluded)
        self._each(t.SNIPPET_LICENSE_INFO, snippet.license_info_in_snippet)
        self._text(t.SNIPPET_LICENSE_COMMENTS, snippet.license_comments)
        self._copyright(t.SNIPPET_COPYRIGHT_TEXT, snippet.copyright_text)
        self._text(t.SNIPPET_COMMENT, snippet.comment)
        self._line(t.SNIPPET_NAME, snippet.name)
        self._each(t.SNIPPET_ATTRIBUTION_TEXT, snippet.attribution_texts, wrap=True)
        self._links(snippet)

    def _extracted_license(self, extracted: ExtractedLicense) -> None:
        self._lines.append("")
        self._line(t.LICENSE_ID, extracted.license_id)
        self._text(t.EXTRACTED_TEXT, extracted.extracted_text)
        self._line(t.LICENSE_NAME, extracted.name)
        self._each(t.LICENSE_CROSS_REFERENCE, extracted.see_also)
        self._text(t.LICENSE_COMMENT, extracted.comment)


def serialize_tag_value(graph: DocumentGraph, config: Optional[SerializeConfig] = None) -> bytes:
    """Serialize ``graph`` to encoded tag-value bytes."""
    return TagValueSerializer(graph, config).to_bytes()


def export_tag_value(
    graph: DocumentGraph,
    output_path: Path,
    config: Optional[SerializeConfig] = None,
) -> None:
    """Export graph to a tag-value file.

    Args:
        graph: Document graph to export.
        output_path: Output file path.
        config: Serialization options.
    """
    logger.info("Exporting document %s to tag-value: %s", graph.namespace, output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = serialize_tag_value(graph, config)
    output_path.write_bytes(data)

    logger.info("Tag-value export completed: %s, %d bytes", graph.stats(), len(data))
