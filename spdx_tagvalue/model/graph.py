"""Document graph: all elements of one SPDX document and the links between them.

DocumentGraph wraps a networkx MultiDiGraph. Nodes are keyed by element
identifier and carry the element ``kind`` and its pydantic ``entity``; edges
carry an ``EdgeKind`` and, for relationships, the Relationship model.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, Iterator, List, Optional, Type, Union

import networkx as nx

from .enums import EdgeKind, ElementKind, RelationshipType
from .errors import (
    DuplicateElementError,
    ModelError,
    OwnershipError,
    UnknownElementError,
)
from .schema import (
    DOCUMENT_SPDX_ID,
    NOASSERTION_ELEMENT,
    NONE_ELEMENT,
    Document,
    ExtractedLicense,
    File,
    Package,
    Relationship,
    Snippet,
)
from .verify import verify_entity

logger = logging.getLogger("spdx_tagvalue.model.graph")

Entity = Union[Document, Package, File, Snippet, ExtractedLicense]

ANONYMOUS_PREFIX = "__anon__"
GENERATED_ID_PREFIX = "SPDXRef-gnrtd"

_ENTITY_TYPES: Dict[ElementKind, Type[Any]] = {
    ElementKind.PACKAGE: Package,
    ElementKind.FILE: File,
    ElementKind.SNIPPET: Snippet,
    ElementKind.EXTRACTED_LICENSE: ExtractedLicense,
}


def entity_type(kind: ElementKind) -> Type[Any]:
    """Return the model class used for ``kind``."""
    try:
        return _ENTITY_TYPES[kind]
    except KeyError:
        raise ModelError(f"Elements of kind {kind.value} cannot be created") from None


class DocumentGraph:
    """All elements of a single document namespace.

    The document node and the NONE/NOASSERTION pseudo-elements exist from
    construction, so relationships can always target them.
    """

    def __init__(self, namespace: str) -> None:
        """Initialize an empty document graph.

        Args:
            namespace: Document namespace URI.
        """
        self.namespace = namespace
        self._graph = nx.MultiDiGraph()
        self._anonymous_ids = itertools.count(1)
        self._generated_ids = itertools.count(1)

        self.document = Document(namespace=namespace)
        self._graph.add_node(
            DOCUMENT_SPDX_ID, kind=ElementKind.DOCUMENT, entity=self.document
        )
        for pseudo in (NONE_ELEMENT, NOASSERTION_ELEMENT):
            self._graph.add_node(pseudo, kind=ElementKind.PSEUDO, entity=None)

        logger.debug("DocumentGraph created for namespace %s", namespace)

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Underlying networkx graph (read it, do not mutate it)."""
        return self._graph

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def exists(self, element_id: str) -> bool:
        return self._graph.has_node(element_id)

    def kind_of(self, element_id: str) -> Optional[ElementKind]:
        if not self._graph.has_node(element_id):
            return None
        return self._graph.nodes[element_id]["kind"]

    def get_entity(self, element_id: str) -> Optional[Entity]:
        """Return the entity stored under ``element_id``.

        Pseudo-elements and external proxies exist but have no entity, so
        this returns None for them as well as for unknown identifiers.
        """
        if not self._graph.has_node(element_id):
            return None
        return self._graph.nodes[element_id].get("entity")

    def create_entity(self, kind: ElementKind, element_id: str) -> Entity:
        """Create and register a new, empty entity.

        Args:
            kind: Kind of element to create.
            element_id: SPDX identifier (or LicenseRef for extracted licenses).

        Returns:
            The new entity.

        Raises:
            DuplicateElementError: If ``element_id`` is already in use.
            ModelError: If ``kind`` cannot be created directly.
        """
        if self._graph.has_node(element_id):
            raise DuplicateElementError(
                f"Element {element_id} already exists in document {self.namespace}"
            )
        model = entity_type(kind)
        if kind == ElementKind.EXTRACTED_LICENSE:
            entity = model(license_id=element_id)
        else:
            entity = model(spdx_id=element_id)
        self._graph.add_node(element_id, kind=kind, entity=entity)
        logger.debug("Created %s %s", kind.value, element_id)
        return entity

    def next_anonymous_id(self) -> str:
        """Allocate an identifier for an element whose real one is unknown."""
        while True:
            candidate = f"{ANONYMOUS_PREFIX}{next(self._anonymous_ids)}"
            if not self._graph.has_node(candidate):
                return candidate

    def next_spdx_id(self) -> str:
        """Allocate an unused SPDX identifier for a generated element."""
        while True:
            candidate = f"{GENERATED_ID_PREFIX}{next(self._generated_ids)}"
            if not self._graph.has_node(candidate):
                return candidate

    @staticmethod
    def is_anonymous(element_id: str) -> bool:
        return element_id.startswith(ANONYMOUS_PREFIX)

    def mount_external_element(self, element_id: str) -> None:
        """Create a proxy node for an element defined in another document.

        Args:
            element_id: Reference of the form ``DocumentRef-x:SPDXRef-y``.
        """
        if self._graph.has_node(element_id):
            return
        ref_id = element_id.split(":", 1)[0]
        self._graph.add_node(
            element_id,
            kind=ElementKind.EXTERNAL,
            entity=None,
            external_document_ref=ref_id,
        )
        logger.debug("Mounted external element %s", element_id)

    def elements(self, kind: ElementKind) -> List[Any]:
        """Return every entity of ``kind`` in insertion order."""
        return [
            attrs["entity"]
            for _, attrs in self._graph.nodes(data=True)
            if attrs["kind"] == kind
        ]

    def element_ids(self, kind: ElementKind) -> List[str]:
        return [
            node_id
            for node_id, attrs in self._graph.nodes(data=True)
            if attrs["kind"] == kind
        ]

    def verify(self, entity: Any) -> List[str]:
        """Run structural verification on one entity of this graph."""
        return verify_entity(self, entity)

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    def _require(self, element_id: str) -> None:
        if not self._graph.has_node(element_id):
            raise UnknownElementError(
                f"Element {element_id} does not exist in document {self.namespace}"
            )

    def _edges(self, source: str, kind: EdgeKind) -> Iterator[Any]:
        for _, target, attrs in self._graph.out_edges(source, data=True):
            if attrs["kind"] == kind:
                yield target, attrs

    def add_relationship(self, relationship: Relationship) -> None:
        """Attach a relationship between two existing elements.

        Raises:
            UnknownElementError: If the source or target does not exist.
        """
        self._require(relationship.source_id)
        self._require(relationship.target_id)
        self._graph.add_edge(
            relationship.source_id,
            relationship.target_id,
            kind=EdgeKind.RELATIONSHIP,
            relationship=relationship,
        )

    def relationships_of(self, element_id: str) -> List[Relationship]:
        """Relationships whose source is ``element_id``, in insertion order."""
        if not self._graph.has_node(element_id):
            return []
        return [
            attrs["relationship"]
            for _, attrs in self._edges(element_id, EdgeKind.RELATIONSHIP)
        ]

    def relationships(self) -> List[Relationship]:
        return [
            attrs["relationship"]
            for _, _, attrs in self._graph.edges(data=True)
            if attrs["kind"] == EdgeKind.RELATIONSHIP
        ]

    def describes(self) -> List[str]:
        """Identifiers the document describes, in declaration order."""
        return [
            rel.target_id
            for rel in self.relationships_of(DOCUMENT_SPDX_ID)
            if rel.relationship_type == RelationshipType.DESCRIBES
        ]

    # ------------------------------------------------------------------
    # Package contents
    # ------------------------------------------------------------------

    def add_file_to_package(self, package_id: str, file_id: str) -> None:
        """Make ``file_id`` part of ``package_id``.

        Raises:
            UnknownElementError: If either element does not exist.
            OwnershipError: If the file already belongs to another package.
        """
        self._require(package_id)
        self._require(file_id)
        owner = self._owner_id(file_id)
        if owner == package_id:
            return
        if owner is not None:
            raise OwnershipError(
                f"File {file_id} already belongs to package {owner}"
            )
        self._graph.add_edge(package_id, file_id, kind=EdgeKind.HAS_FILE)

    def _owner_id(self, file_id: str) -> Optional[str]:
        for source, _, attrs in self._graph.in_edges(file_id, data=True):
            if attrs["kind"] == EdgeKind.HAS_FILE:
                return source
        return None

    def files_of(self, package_id: str) -> List[File]:
        if not self._graph.has_node(package_id):
            return []
        return [
            self._graph.nodes[target]["entity"]
            for target, _ in self._edges(package_id, EdgeKind.HAS_FILE)
        ]

    def package_of(self, file_id: str) -> Optional[Package]:
        if not self._graph.has_node(file_id):
            return None
        owner = self._owner_id(file_id)
        return self.get_entity(owner) if owner else None

    def add_file_dependency(self, file_id: str, dependency_id: str) -> None:
        """Record that ``file_id`` depends on ``dependency_id``."""
        self._require(file_id)
        self._require(dependency_id)
        if any(
            target == dependency_id
            for target, _ in self._edges(file_id, EdgeKind.FILE_DEPENDENCY)
        ):
            return
        self._graph.add_edge(file_id, dependency_id, kind=EdgeKind.FILE_DEPENDENCY)

    def dependencies_of(self, file_id: str) -> List[File]:
        if not self._graph.has_node(file_id):
            return []
        return [
            self._graph.nodes[target]["entity"]
            for target, _ in self._edges(file_id, EdgeKind.FILE_DEPENDENCY)
        ]

    def set_snippet_from_file(self, snippet_id: str, file_id: str) -> None:
        """Set the file a snippet was taken from, replacing any previous one."""
        self._require(snippet_id)
        self._require(file_id)
        stale = [
            (snippet_id, target, key)
            for _, target, key, attrs in self._graph.out_edges(
                snippet_id, keys=True, data=True
            )
            if attrs["kind"] == EdgeKind.SNIPPET_FROM_FILE
        ]
        self._graph.remove_edges_from(stale)
        self._graph.add_edge(snippet_id, file_id, kind=EdgeKind.SNIPPET_FROM_FILE)

    def snippet_from_file(self, snippet_id: str) -> Optional[File]:
        if not self._graph.has_node(snippet_id):
            return None
        for target, _ in self._edges(snippet_id, EdgeKind.SNIPPET_FROM_FILE):
            return self._graph.nodes[target]["entity"]
        return None

    def stats(self) -> Dict[str, int]:
        """Element counts by kind, for logging."""
        counts: Dict[str, int] = {}
        for _, attrs in self._graph.nodes(data=True):
            key = attrs["kind"].value
            counts[key] = counts.get(key, 0) + 1
        return counts
