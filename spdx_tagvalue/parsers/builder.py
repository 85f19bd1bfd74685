"""Context-sensitive builder: turns tag/value events into a document graph.

The builder tracks which element is being defined. Packages and files can
receive properties before their SPDXID tag, so they are accumulated on a
pending model carrying a placeholder identifier and only committed to the
document graph, under their real identifier, when their context closes.
Snippets and extracted licenses are keyed by their first tag and are created
in the graph immediately.

References that may point forward (file dependencies, snippet origins,
relationships and annotations) are staged in DeferredTables and resolved by
DeferredResolver once the tokenizer signals end of input.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from spdx_tagvalue.config.schema import ParseConfig
from spdx_tagvalue.model.enums import (
    AnnotationType,
    ElementKind,
    Purpose,
    RelationshipType,
)
from spdx_tagvalue.model.errors import (
    DuplicateElementError,
    DuplicateNamespaceError,
    OwnershipError,
)
from spdx_tagvalue.model.graph import DocumentGraph
from spdx_tagvalue.model.schema import (
    DOCUMENT_SPDX_ID,
    MISSING_LICENSE_TEXT,
    NOASSERTION_ELEMENT,
    Annotation,
    ExternalRef,
    ExtractedLicense,
    File,
    Package,
    Relationship,
    Snippet,
    put_checksum,
)
from spdx_tagvalue.model.store import ModelStore

from . import tags as t
from .diagnostics import WarningCollector
from .errors import SequencingError, TagValueError, TagValueFormatError
from .resolver import (
    DeferredResolver,
    DeferredTables,
    StagedAnnotation,
    StagedRanges,
    StagedRelationship,
)
from .tokenizer import TagValuePair
from .values import (
    normalize_value,
    parse_bool,
    parse_checksum,
    parse_enum,
    parse_external_document_ref,
    parse_external_ref,
    parse_file_type,
    parse_relationship,
    parse_verification_code,
    spec_version_tuple,
    split_list,
)

logger = logging.getLogger("spdx_tagvalue.parsers.builder")

ARTIFACT_PACKAGE_COMMENT = "This package was created to replace a deprecated DoapProject"
ARTIFACT_RELATIONSHIP_COMMENT = "This relationship was translated from a deprecated ArtifactOf"


class Context(str, Enum):
    """What the builder is currently defining."""

    NONE = "none"
    DOCUMENT = "document"
    PACKAGE = "package"
    FILE = "file"
    SNIPPET = "snippet"
    EXTRACTED_LICENSE = "extracted_license"
    ANNOTATION = "annotation"


# =============================================================================
# Open contexts
# =============================================================================


@dataclass
class PendingPackage:
    entity: Package
    line_number: int
    spdx_id: Optional[str] = None
    last_external_ref: Optional[ExternalRef] = None

    context = Context.PACKAGE


@dataclass
class ArtifactOf:
    """Legacy DOAP project reference found inside a file definition."""

    line_number: int
    name: Optional[str] = None
    homepage: Optional[str] = None
    uri: Optional[str] = None


@dataclass
class PendingFile:
    entity: File
    line_number: int
    spdx_id: Optional[str] = None
    dependencies: List[str] = field(default_factory=list)
    artifacts: List[ArtifactOf] = field(default_factory=list)

    context = Context.FILE


@dataclass
class OpenSnippet:
    entity: Snippet
    line_number: int
    from_file: Optional[str] = None

    context = Context.SNIPPET


@dataclass
class OpenLicense:
    entity: ExtractedLicense
    line_number: int

    context = Context.EXTRACTED_LICENSE


@dataclass
class PendingAnnotation:
    annotation: Annotation
    line_number: int


ActiveContext = Union[PendingPackage, PendingFile, OpenSnippet, OpenLicense]


@dataclass
class ParseResult:
    """Outcome of one successful parse."""

    namespace: str
    graph: DocumentGraph
    warnings: List[str]


# Scalar properties: tag -> model field name
PACKAGE_FIELDS: Dict[str, str] = {
    t.PACKAGE_VERSION: "version",
    t.PACKAGE_FILE_NAME: "package_file_name",
    t.PACKAGE_SUPPLIER: "supplier",
    t.PACKAGE_ORIGINATOR: "originator",
    t.PACKAGE_DOWNLOAD_LOCATION: "download_location",
    t.PACKAGE_HOMEPAGE: "homepage",
    t.PACKAGE_SOURCE_INFO: "source_info",
    t.PACKAGE_LICENSE_CONCLUDED: "license_concluded",
    t.PACKAGE_LICENSE_DECLARED: "license_declared",
    t.PACKAGE_LICENSE_COMMENTS: "license_comments",
    t.PACKAGE_COPYRIGHT_TEXT: "copyright_text",
    t.PACKAGE_SUMMARY: "summary",
    t.PACKAGE_DESCRIPTION: "description",
    t.PACKAGE_COMMENT: "comment",
    t.RELEASE_DATE: "release_date",
    t.BUILT_DATE: "built_date",
    t.VALID_UNTIL_DATE: "valid_until_date",
}
PACKAGE_LIST_FIELDS: Dict[str, str] = {
    t.PACKAGE_LICENSE_INFO_FROM_FILES: "license_info_from_files",
    t.PACKAGE_ATTRIBUTION_TEXT: "attribution_texts",
}

FILE_FIELDS: Dict[str, str] = {
    t.FILE_LICENSE_CONCLUDED: "license_concluded",
    t.FILE_LICENSE_COMMENTS: "license_comments",
    t.FILE_COPYRIGHT_TEXT: "copyright_text",
    t.FILE_COMMENT: "comment",
    t.FILE_NOTICE: "notice",
}
FILE_LIST_FIELDS: Dict[str, str] = {
    t.FILE_LICENSE_INFO: "license_info_in_file",
    t.FILE_CONTRIBUTOR: "contributors",
    t.FILE_ATTRIBUTION_TEXT: "attribution_texts",
}

SNIPPET_FIELDS: Dict[str, str] = {
    t.SNIPPET_LICENSE_CONCLUDED: "license_concluded",
    t.SNIPPET_LICENSE_COMMENTS: "license_comments",
    t.SNIPPET_COPYRIGHT_TEXT: "copyright_text",
    t.SNIPPET_COMMENT: "comment",
    t.SNIPPET_NAME: "name",
}
SNIPPET_LIST_FIELDS: Dict[str, str] = {
    t.SNIPPET_LICENSE_INFO: "license_info_in_snippet",
    t.SNIPPET_ATTRIBUTION_TEXT: "attribution_texts",
}

LICENSE_FIELDS: Dict[str, str] = {
    t.EXTRACTED_TEXT: "extracted_text",
    t.LICENSE_NAME: "name",
    t.LICENSE_COMMENT: "comment",
}

# Tags that belong to a specific element, used to explain sequencing errors.
_OWNER_OF_TAG: List[Tuple[frozenset, str]] = [
    (t.PACKAGE_TAGS, "package"),
    (t.FILE_TAGS, "file"),
    (t.SNIPPET_TAGS, "snippet"),
    (t.EXTRACTED_LICENSE_TAGS, "extracted license"),
    (t.ANNOTATION_TAGS, "annotation"),
]


class TagValueBuilder:
    """State machine consuming tag/value pairs for one input.

    A builder is single use: create a fresh instance per input. The store it
    writes to may be shared by sequential parses of different documents.
    """

    def __init__(
        self,
        store: Optional[ModelStore] = None,
        config: Optional[ParseConfig] = None,
    ) -> None:
        """Initialize builder.

        Args:
            store: Store receiving the parsed document. A private store is
                created when omitted.
            config: Parse options.
        """
        self.store = store if store is not None else ModelStore()
        self.config = config or ParseConfig()
        self.tables = DeferredTables()
        self.diagnostics = WarningCollector()
        self.result: Optional[ParseResult] = None

        self._graph: Optional[DocumentGraph] = None
        self._preamble: List[TagValuePair] = []
        self._active: Optional[ActiveContext] = None
        self._annotation: Optional[PendingAnnotation] = None
        self._owner_package_id: Optional[str] = None
        self._last_relationship: Optional[Relationship] = None
        self._last_review: Optional[Annotation] = None
        self._finished = False

        self._handlers: Dict[Context, Tuple[frozenset, Callable[[str, str, int], None]]] = {
            Context.PACKAGE: (t.PACKAGE_TAGS, self._package_tag),
            Context.FILE: (t.FILE_TAGS, self._file_tag),
            Context.SNIPPET: (t.SNIPPET_TAGS, self._snippet_tag),
            Context.EXTRACTED_LICENSE: (t.EXTRACTED_LICENSE_TAGS, self._license_tag),
        }

    @property
    def context(self) -> Context:
        if self._annotation is not None:
            return Context.ANNOTATION
        if self._graph is None:
            return Context.NONE
        if self._active is None:
            return Context.DOCUMENT
        return self._active.context

    @property
    def graph(self) -> Optional[DocumentGraph]:
        return self._graph

    # ------------------------------------------------------------------
    # Tokenizer behavior
    # ------------------------------------------------------------------

    def build(self, pair: TagValuePair) -> None:
        """Apply one tag/value pair.

        Raises:
            TagValueError: Fatal syntax, sequencing or format error, located
                at the pair's line.
        """
        if self._finished:
            raise RuntimeError("TagValueBuilder received input after exit()")
        value = normalize_value(pair.value)
        try:
            self._dispatch(pair.tag, value, pair.line_number)
        except TagValueError as exc:
            if exc.line_number is not None:
                raise
            raise exc.at(pair.line_number, pair.tag, pair.value) from None

    def exit(self) -> None:
        """Close open contexts and run deferred resolution.

        Raises:
            TagValueError: If resolution fails or no namespace was declared.
        """
        if self._finished:
            raise RuntimeError("TagValueBuilder.exit() called twice")
        self._finished = True

        if self._graph is None:
            self._generate_namespace_or_fail(None)
        self._close_annotation()
        self._close_active()

        graph = self._require_graph()
        DeferredResolver(graph, self.tables, self.diagnostics, self.config).resolve()
        self.result = ParseResult(
            namespace=graph.namespace,
            graph=graph,
            warnings=self.diagnostics.messages,
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, tag: str, value: str, line: int) -> None:
        if self._annotation is not None:
            if tag in t.ANNOTATION_TAGS:
                self._annotation_tag(tag, value, line)
                return
            self._close_annotation()

        if self._graph is None:
            self._pre_namespace_tag(tag, value, line)
            return

        handler = self._handlers.get(self.context)
        if handler is not None and tag in handler[0]:
            handler[1](tag, value, line)
            return
        if tag in t.DOCUMENT_TAGS:
            self._document_tag(tag, value, line)
            return

        for owned_tags, owner in _OWNER_OF_TAG:
            if tag in owned_tags:
                raise SequencingError(
                    f"{tag} is only valid within a {owner} definition; "
                    f"current context is {self.context.value}"
                )
        self.diagnostics.add(f"Unrecognized tag {tag} at line number {line}")

    def _require_graph(self) -> DocumentGraph:
        if self._graph is None:
            raise SequencingError("No document namespace has been declared")
        return self._graph

    # ------------------------------------------------------------------
    # Document creation
    # ------------------------------------------------------------------

    def _pre_namespace_tag(self, tag: str, value: str, line: int) -> None:
        if tag == t.DOCUMENT_NAMESPACE:
            self._create_document(value, line)
            return
        if tag in t.PRE_NAMESPACE_TAGS:
            self._preamble.append(TagValuePair(tag, value, line))
            return
        self._generate_namespace_or_fail(line)
        self._dispatch(tag, value, line)

    def _generate_namespace_or_fail(self, line: Optional[int]) -> None:
        version = next(
            (pair.value for pair in reversed(self._preamble) if pair.tag == t.SPDX_VERSION),
            None,
        )
        parsed = spec_version_tuple(version)
        if self.config.allow_generated_namespace and parsed is not None and parsed < (2, 0):
            namespace = f"{self.config.generated_namespace_prefix}{uuid.uuid4()}"
            self.diagnostics.add(
                f"No document namespace was specified for {version}; "
                f"generated {namespace}"
            )
            self._create_document(namespace, line or 0)
            return
        raise SequencingError(
            "The SPDX Document Namespace must be set before other SPDX "
            "document properties are set",
            line,
        )

    def _create_document(self, namespace: str, line: int) -> None:
        if not namespace:
            raise TagValueFormatError("Document namespace must not be empty")
        try:
            self._graph = self.store.create_document(
                namespace, overwrite=self.config.overwrite_existing
            )
        except DuplicateNamespaceError as exc:
            raise SequencingError(str(exc), line) from exc
        logger.debug("Document %s opened at line %d", namespace, line)
        preamble, self._preamble = self._preamble, []
        for pair in preamble:
            try:
                self._document_tag(pair.tag, pair.value, pair.line_number)
            except TagValueError as exc:
                if exc.line_number is not None:
                    raise
                raise exc.at(pair.line_number, pair.tag, pair.value) from None

    # ------------------------------------------------------------------
    # Document-level tags
    # ------------------------------------------------------------------

    def _document_tag(self, tag: str, value: str, line: int) -> None:
        graph = self._require_graph()
        document = graph.document
        creation = document.creation_info

        if tag == t.DOCUMENT_NAMESPACE:
            raise SequencingError("More than one document namespace was specified")
        elif tag == t.SPDX_VERSION:
            document.spec_version = value
        elif tag == t.DATA_LICENSE:
            document.data_license = value
        elif tag == t.DOCUMENT_NAME:
            document.name = value
        elif tag == t.SPDX_ID:
            if value != DOCUMENT_SPDX_ID:
                raise TagValueFormatError(
                    f"Document SPDXID must be {DOCUMENT_SPDX_ID}, found {value}"
                )
        elif tag == t.DOCUMENT_COMMENT:
            document.comment = value
        elif tag == t.EXTERNAL_DOCUMENT_REF:
            ref = parse_external_document_ref(value)
            if document.external_document_ref(ref.document_ref_id) is not None:
                raise SequencingError(
                    f"Duplicate external document reference {ref.document_ref_id}"
                )
            document.external_document_refs.append(ref)
        elif tag == t.CREATOR:
            creation.creators.append(value)
        elif tag == t.CREATED:
            creation.created = value
        elif tag == t.CREATOR_COMMENT:
            creation.comment = value
        elif tag == t.LICENSE_LIST_VERSION:
            creation.license_list_version = value
        elif tag in (t.REVIEWER, t.REVIEW_DATE, t.REVIEW_COMMENT):
            self._review_tag(tag, value, line)
        elif tag == t.RELATIONSHIP:
            source_id, relationship_type, target_id = parse_relationship(value)
            relationship = Relationship(
                source_id=source_id,
                relationship_type=relationship_type,
                target_id=target_id,
            )
            self.tables.relationships.append(StagedRelationship(relationship, line))
            self._last_relationship = relationship
        elif tag == t.RELATIONSHIP_COMMENT:
            if self._last_relationship is None:
                raise SequencingError("Relationship comment found without a relationship")
            if self._last_relationship.comment is not None:
                raise SequencingError("More than one comment for a relationship")
            self._last_relationship.comment = value
        elif tag == t.ANNOTATOR:
            self._annotation = PendingAnnotation(Annotation(annotator=value), line)
            logger.debug("Annotation opened at line %d", line)
        elif tag == t.PACKAGE_NAME:
            self._close_active()
            package = Package(spdx_id=graph.next_anonymous_id(), name=value)
            self._active = PendingPackage(package, line)
            logger.debug("Package %s opened at line %d", value, line)
        elif tag == t.FILE_NAME:
            self._close_active()
            file = File(spdx_id=graph.next_anonymous_id(), name=value)
            self._active = PendingFile(file, line)
            logger.debug("File %s opened at line %d", value, line)
        elif tag == t.SNIPPET_SPDX_ID:
            self._close_active()
            snippet = self._create(ElementKind.SNIPPET, value, line)
            self._active = OpenSnippet(snippet, line)
        elif tag == t.LICENSE_ID:
            self._close_active()
            self._active = OpenLicense(self._open_license(value, line), line)
        else:  # pragma: no cover - DOCUMENT_TAGS and this chain must agree
            raise SequencingError(f"Unhandled document tag {tag}")

    def _review_tag(self, tag: str, value: str, line: int) -> None:
        if tag == t.REVIEWER:
            review = Annotation(
                annotator=value,
                annotation_type=AnnotationType.REVIEW,
                spdx_ref=DOCUMENT_SPDX_ID,
            )
            self.tables.annotations.append(StagedAnnotation(review, line))
            self._last_review = review
            self.diagnostics.add(
                f"Converted deprecated Reviewer to annotation for reviewer {value} "
                f"at line number {line}"
            )
            return
        if self._last_review is None:
            raise SequencingError(f"{tag} found without a preceding Reviewer")
        if tag == t.REVIEW_DATE:
            self._last_review.date = value
        else:
            self._last_review.comment = value

    def _create(self, kind: ElementKind, element_id: str, line: int):
        graph = self._require_graph()
        try:
            entity = graph.create_entity(kind, element_id)
        except DuplicateElementError as exc:
            raise SequencingError(f"Duplicate SPDX identifier {element_id}", line) from exc
        self.tables.element_lines[element_id] = line
        return entity

    def _open_license(self, license_id: str, line: int) -> ExtractedLicense:
        graph = self._require_graph()
        if graph.kind_of(license_id) == ElementKind.EXTRACTED_LICENSE:
            logger.debug("Reopening extracted license %s at line %d", license_id, line)
            return graph.get_entity(license_id)
        return self._create(ElementKind.EXTRACTED_LICENSE, license_id, line)

    # ------------------------------------------------------------------
    # Element tags
    # ------------------------------------------------------------------

    def _package_tag(self, tag: str, value: str, line: int) -> None:
        pending: PendingPackage = self._active
        package = pending.entity

        if tag == t.SPDX_ID:
            if pending.spdx_id is not None:
                raise SequencingError(
                    f"Duplicate SPDXID for package {package.name}; "
                    f"already set to {pending.spdx_id}"
                )
            pending.spdx_id = value
        elif tag in PACKAGE_FIELDS:
            setattr(package, PACKAGE_FIELDS[tag], value)
        elif tag in PACKAGE_LIST_FIELDS:
            getattr(package, PACKAGE_LIST_FIELDS[tag]).append(value)
        elif tag == t.FILES_ANALYZED:
            package.files_analyzed = parse_bool(value)
        elif tag == t.PACKAGE_VERIFICATION_CODE:
            package.verification_code = parse_verification_code(value)
        elif tag == t.PACKAGE_CHECKSUM:
            put_checksum(package.checksums, parse_checksum(value))
        elif tag == t.EXTERNAL_REF:
            ref = parse_external_ref(value)
            package.external_refs.append(ref)
            pending.last_external_ref = ref
        elif tag == t.EXTERNAL_REF_COMMENT:
            ref = pending.last_external_ref
            if ref is None:
                raise SequencingError("External reference comment found without an ExternalRef")
            if ref.comment is not None:
                raise SequencingError("More than one comment for an external reference")
            ref.comment = value
        elif tag == t.PRIMARY_PACKAGE_PURPOSE:
            package.primary_package_purpose = parse_enum(Purpose, value, "package purpose")

    def _file_tag(self, tag: str, value: str, line: int) -> None:
        pending: PendingFile = self._active
        file = pending.entity

        if tag == t.SPDX_ID:
            if pending.spdx_id is not None:
                raise SequencingError(
                    f"Duplicate SPDXID for file {file.name}; already set to {pending.spdx_id}"
                )
            pending.spdx_id = value
        elif tag in FILE_FIELDS:
            setattr(file, FILE_FIELDS[tag], value)
        elif tag in FILE_LIST_FIELDS:
            getattr(file, FILE_LIST_FIELDS[tag]).append(value)
        elif tag == t.FILE_TYPE:
            file_type, not_upper = parse_file_type(value)
            if not_upper:
                if not self.config.lenient_file_types:
                    raise TagValueFormatError(f"File type must be upper case: {value}")
                self.diagnostics.add(
                    f"Invalid file type - needs to be uppercased: {value} "
                    f"at line number {line}"
                )
            if file_type not in file.file_types:
                file.file_types.append(file_type)
        elif tag == t.FILE_CHECKSUM:
            put_checksum(file.checksums, parse_checksum(value))
        elif tag == t.FILE_DEPENDENCY:
            pending.dependencies.append(value)
        elif tag == t.ARTIFACT_OF_PROJECT_NAME:
            pending.artifacts.append(ArtifactOf(line, name=value))
        elif tag in (t.ARTIFACT_OF_PROJECT_HOMEPAGE, t.ARTIFACT_OF_PROJECT_URI):
            attr = "homepage" if tag == t.ARTIFACT_OF_PROJECT_HOMEPAGE else "uri"
            if not pending.artifacts or getattr(pending.artifacts[-1], attr) is not None:
                pending.artifacts.append(ArtifactOf(line))
            setattr(pending.artifacts[-1], attr, value)

    def _snippet_tag(self, tag: str, value: str, line: int) -> None:
        current: OpenSnippet = self._active
        snippet = current.entity

        if tag in SNIPPET_FIELDS:
            setattr(snippet, SNIPPET_FIELDS[tag], value)
        elif tag in SNIPPET_LIST_FIELDS:
            getattr(snippet, SNIPPET_LIST_FIELDS[tag]).append(value)
        elif tag == t.SNIPPET_FROM_FILE_ID:
            if current.from_file is not None:
                raise SequencingError(
                    f"More than one snippet from file for {snippet.spdx_id}"
                )
            current.from_file = value
            self.tables.snippet_files[value].append(snippet.spdx_id)
        elif tag in (t.SNIPPET_BYTE_RANGE, t.SNIPPET_LINE_RANGE):
            staged = self.tables.snippet_ranges.setdefault(snippet.spdx_id, StagedRanges())
            if tag == t.SNIPPET_BYTE_RANGE:
                staged.byte_range, staged.byte_range_line = value, line
            else:
                staged.line_range, staged.line_range_line = value, line

    def _license_tag(self, tag: str, value: str, line: int) -> None:
        extracted = self._active.entity
        if tag in LICENSE_FIELDS:
            setattr(extracted, LICENSE_FIELDS[tag], value)
        elif tag == t.LICENSE_CROSS_REFERENCE:
            extracted.see_also.extend(split_list(value))

    def _annotation_tag(self, tag: str, value: str, line: int) -> None:
        annotation = self._annotation.annotation
        if tag == t.ANNOTATION_DATE:
            annotation.date = value
        elif tag == t.ANNOTATION_COMMENT:
            annotation.comment = value
        elif tag == t.ANNOTATION_TYPE:
            annotation.annotation_type = parse_enum(AnnotationType, value, "annotation type")
        elif tag == t.ANNOTATION_SPDX_REF:
            annotation.spdx_ref = value

    # ------------------------------------------------------------------
    # Closing contexts
    # ------------------------------------------------------------------

    def _close_annotation(self) -> None:
        if self._annotation is None:
            return
        pending, self._annotation = self._annotation, None
        self.tables.annotations.append(
            StagedAnnotation(pending.annotation, pending.line_number)
        )

    def _close_active(self) -> None:
        active, self._active = self._active, None
        if active is None:
            return
        if isinstance(active, PendingPackage):
            self._commit_package(active)
        elif isinstance(active, PendingFile):
            self._commit_file(active)
        elif isinstance(active, OpenLicense):
            if not active.entity.extracted_text:
                active.entity.extracted_text = MISSING_LICENSE_TEXT
        logger.debug("Closed %s context opened at line %d", active.context.value, active.line_number)

    def _commit_package(self, pending: PendingPackage) -> None:
        if pending.spdx_id is None:
            raise SequencingError(
                f"Package {pending.entity.name} has no SPDXID",
                pending.line_number,
                t.PACKAGE_NAME,
                pending.entity.name,
            )
        package = self._create(ElementKind.PACKAGE, pending.spdx_id, pending.line_number)
        package.copy_from(pending.entity)
        self._owner_package_id = pending.spdx_id

    def _commit_file(self, pending: PendingFile) -> None:
        graph = self._require_graph()
        if pending.spdx_id is None:
            raise SequencingError(
                f"File {pending.entity.name} has no SPDXID",
                pending.line_number,
                t.FILE_NAME,
                pending.entity.name,
            )
        file_id = pending.spdx_id
        file = self._create(ElementKind.FILE, file_id, pending.line_number)
        file.copy_from(pending.entity)

        if self._owner_package_id is not None:
            try:
                graph.add_file_to_package(self._owner_package_id, file_id)
            except OwnershipError as exc:
                raise SequencingError(str(exc), pending.line_number) from exc

        for name in pending.dependencies:
            self.tables.file_dependencies[name].append(file_id)
        for artifact in pending.artifacts:
            self._convert_artifact(file_id, artifact)

    def _convert_artifact(self, file_id: str, artifact: ArtifactOf) -> None:
        graph = self._require_graph()
        package_id = graph.next_spdx_id()
        package = self._create(ElementKind.PACKAGE, package_id, artifact.line_number)
        package.name = artifact.name or NOASSERTION_ELEMENT
        package.homepage = artifact.homepage
        package.download_location = artifact.uri or NOASSERTION_ELEMENT
        package.files_analyzed = False
        package.comment = ARTIFACT_PACKAGE_COMMENT
        self.tables.synthetic_packages.add(package_id)

        relationship = Relationship(
            source_id=file_id,
            relationship_type=RelationshipType.GENERATED_FROM,
            target_id=package_id,
            comment=ARTIFACT_RELATIONSHIP_COMMENT,
        )
        self.tables.relationships.append(
            StagedRelationship(relationship, artifact.line_number)
        )
        self.diagnostics.add(
            f"Converted deprecated ArtifactOf project {package.name} to package "
            f"{package_id} at line number {artifact.line_number}"
        )
