"""Deferred resolution of forward references after all input is read.

The builder records references it cannot resolve yet in DeferredTables:
file dependencies keyed by file name, snippet origins keyed by file ID,
and relationships and annotations in input order. DeferredResolver runs
once, after the builder has committed its last open context, and attaches
everything in a fixed order before verifying the finished graph.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict, Dict, List, Optional, Set

from spdx_tagvalue.config.schema import ParseConfig
from spdx_tagvalue.model.enums import ElementKind, RelationshipType
from spdx_tagvalue.model.graph import DocumentGraph
from spdx_tagvalue.model.schema import DOCUMENT_SPDX_ID, Annotation, Relationship
from spdx_tagvalue.model.verify import MISSING_LICENSE_TEXT_MESSAGE

from .diagnostics import WarningCollector
from .errors import SequencingError, TagValueError
from .tags import SNIPPET_BYTE_RANGE, SNIPPET_LINE_RANGE
from .values import parse_range

logger = logging.getLogger("spdx_tagvalue.parsers.resolver")

DEFAULT_DESCRIBES_COMMENT = (
    "This describes relationship was added as a default relationship by the "
    "tag-value parser."
)

_VERIFY_LABELS = {
    ElementKind.PACKAGE: "Package",
    ElementKind.FILE: "File",
    ElementKind.SNIPPET: "Snippet",
    ElementKind.EXTRACTED_LICENSE: "Extracted license",
}


@dataclass
class StagedRelationship:
    relationship: Relationship
    line_number: int


@dataclass
class StagedAnnotation:
    annotation: Annotation
    line_number: int


@dataclass
class StagedRanges:
    """Raw range strings for one snippet, parsed when its file is found."""

    byte_range: Optional[str] = None
    byte_range_line: int = 0
    line_range: Optional[str] = None
    line_range_line: int = 0


@dataclass
class DeferredTables:
    """Everything the builder could not resolve while reading."""

    # file name -> IDs of files that declared a dependency on it
    file_dependencies: DefaultDict[str, List[str]] = field(
        default_factory=lambda: defaultdict(list)
    )
    # file ID -> IDs of snippets taken from it
    snippet_files: DefaultDict[str, List[str]] = field(
        default_factory=lambda: defaultdict(list)
    )
    snippet_ranges: Dict[str, StagedRanges] = field(default_factory=dict)
    relationships: List[StagedRelationship] = field(default_factory=list)
    annotations: List[StagedAnnotation] = field(default_factory=list)
    # element ID -> line number where the element was opened
    element_lines: Dict[str, int] = field(default_factory=dict)
    # packages generated from legacy constructs
    synthetic_packages: Set[str] = field(default_factory=set)


class DeferredResolver:
    """Single pass that completes a document graph after parsing."""

    def __init__(
        self,
        graph: DocumentGraph,
        tables: DeferredTables,
        diagnostics: WarningCollector,
        config: Optional[ParseConfig] = None,
    ) -> None:
        self.graph = graph
        self.tables = tables
        self.diagnostics = diagnostics
        self.config = config or ParseConfig()
        self._resolved = False

    def resolve(self) -> None:
        """Run every resolution step once.

        Raises:
            TagValueError: On malformed staged ranges or a missing or
                ambiguous describes subject.
            RuntimeError: If called twice.
        """
        if self._resolved:
            raise RuntimeError("DeferredResolver.resolve() may only run once")
        self._resolved = True

        self.resolve_files()
        self.resolve_relationships()
        self.resolve_annotations()
        self.ensure_describes()
        self.verify()
        logger.info(
            "Resolved document %s: %s, %d warning(s)",
            self.graph.namespace,
            self.graph.stats(),
            len(self.diagnostics),
        )

    # ------------------------------------------------------------------
    # Step 2 and 3: file dependencies and snippet origins
    # ------------------------------------------------------------------

    def resolve_files(self) -> None:
        matched_names: Set[str] = set()
        matched_ids: Set[str] = set()

        for file in self.graph.elements(ElementKind.FILE):
            owners = self.tables.file_dependencies.get(file.name or "")
            if owners:
                matched_names.add(file.name)
                for owner_id in owners:
                    self.graph.add_file_dependency(owner_id, file.spdx_id)

            snippet_ids = self.tables.snippet_files.get(file.spdx_id)
            if snippet_ids:
                matched_ids.add(file.spdx_id)
                for snippet_id in snippet_ids:
                    self._attach_snippet(snippet_id, file.spdx_id)

        dangling_names = [
            name for name in self.tables.file_dependencies if name not in matched_names
        ]
        if dangling_names:
            self.diagnostics.add(
                "The following file names were listed as file dependencies but "
                "were not found in the list of files:\n"
                + "\n".join(f"\t{name}" for name in dangling_names)
            )
        dangling_ids = [
            file_id for file_id in self.tables.snippet_files if file_id not in matched_ids
        ]
        if dangling_ids:
            self.diagnostics.add(
                "The following file IDs were listed as snippet from files but "
                "were not found in the list of files:\n"
                + "\n".join(f"\t{file_id}" for file_id in dangling_ids)
            )

    def _attach_snippet(self, snippet_id: str, file_id: str) -> None:
        snippet = self.graph.get_entity(snippet_id)
        self.graph.set_snippet_from_file(snippet_id, file_id)
        staged = self.tables.snippet_ranges.get(snippet_id)
        if staged is None:
            return
        try:
            if staged.byte_range is not None:
                snippet.byte_range = parse_range(staged.byte_range)
        except TagValueError as exc:
            raise exc.at(staged.byte_range_line, SNIPPET_BYTE_RANGE, staged.byte_range) from None
        try:
            if staged.line_range is not None:
                snippet.line_range = parse_range(staged.line_range)
        except TagValueError as exc:
            raise exc.at(staged.line_range_line, SNIPPET_LINE_RANGE, staged.line_range) from None

    # ------------------------------------------------------------------
    # Step 4 and 5: relationships and annotations
    # ------------------------------------------------------------------

    def _resolvable(self, element_id: str) -> bool:
        if self.graph.exists(element_id):
            return True
        # DocumentRef-x:SPDXRef-y points into a declared external document.
        ref_id, sep, local_id = element_id.partition(":")
        if sep and local_id and self.graph.document.external_document_ref(ref_id):
            self.graph.mount_external_element(element_id)
            return True
        return False

    def resolve_relationships(self) -> None:
        for staged in self.tables.relationships:
            rel = staged.relationship
            if not self._resolvable(rel.source_id):
                self.diagnostics.add(
                    f"Invalid element reference in relationship: {rel.source_id} "
                    f"at line number {staged.line_number}"
                )
                continue
            if not self._resolvable(rel.target_id):
                self.diagnostics.add(
                    f"Invalid related element reference in relationship: "
                    f"{rel.target_id} at line number {staged.line_number}"
                )
                continue
            self.graph.add_relationship(rel)

    def resolve_annotations(self) -> None:
        for staged in self.tables.annotations:
            annotation = staged.annotation
            if not annotation.spdx_ref:
                self.diagnostics.add(
                    f"missing SPDXREF: tag in annotation {annotation.comment} "
                    f"at line number {staged.line_number}"
                )
                continue
            target = self.graph.get_entity(annotation.spdx_ref)
            if target is None or not hasattr(target, "annotations"):
                self.diagnostics.add(
                    f"Invalid element reference in annotation: {annotation.spdx_ref} "
                    f"at line number {staged.line_number}"
                )
                continue
            target.annotations.append(annotation)

    # ------------------------------------------------------------------
    # Step 6: default describes relationship
    # ------------------------------------------------------------------

    def ensure_describes(self) -> None:
        """Describe the sole package when the document describes nothing.

        Raises:
            SequencingError: If there is not exactly one candidate package.
        """
        if self.graph.describes():
            return
        candidates = [
            package_id
            for package_id in self.graph.element_ids(ElementKind.PACKAGE)
            if package_id not in self.tables.synthetic_packages
        ]
        if len(candidates) != 1:
            detail = "no packages" if not candidates else f"{len(candidates)} packages"
            raise SequencingError(
                "No DESCRIBES relationship was declared and the document has "
                f"{detail}; cannot choose the described element"
            )
        self.graph.add_relationship(
            Relationship(
                source_id=DOCUMENT_SPDX_ID,
                relationship_type=RelationshipType.DESCRIBES,
                target_id=candidates[0],
                comment=DEFAULT_DESCRIBES_COMMENT,
            )
        )
        logger.debug("Added default DESCRIBES relationship to %s", candidates[0])

    # ------------------------------------------------------------------
    # Step 7: verification
    # ------------------------------------------------------------------

    def _keep(self, message: str) -> bool:
        return not (
            self.config.ignore_missing_license_text
            and MISSING_LICENSE_TEXT_MESSAGE in message
        )

    def verify(self) -> None:
        for kind in (ElementKind.PACKAGE, ElementKind.FILE, ElementKind.SNIPPET):
            label = _VERIFY_LABELS[kind]
            for entity in self.graph.elements(kind):
                element_id = entity.spdx_id
                if self.graph.is_anonymous(element_id):
                    self.diagnostics.add(
                        f"Anonymous identifier found for {label.lower()} {entity.name}"
                    )
                self._report(label, element_id, self.graph.verify(entity))

        for extracted in self.graph.elements(ElementKind.EXTRACTED_LICENSE):
            self._report(
                _VERIFY_LABELS[ElementKind.EXTRACTED_LICENSE],
                extracted.license_id,
                self.graph.verify(extracted),
            )

        for message in self.graph.verify(self.graph.document):
            if self._keep(message):
                self.diagnostics.add(message)

    def _report(self, label: str, element_id: str, messages: List[str]) -> None:
        line = self.tables.element_lines.get(element_id)
        where = f"{label} {element_id}" if line is None else f"{label} {element_id} at line {line}"
        for message in messages:
            if self._keep(message):
                self.diagnostics.add(f"{where} invalid: {message}")
