"""Registry of document graphs keyed by namespace."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .errors import DuplicateNamespaceError
from .graph import DocumentGraph

logger = logging.getLogger("spdx_tagvalue.model.store")


class ModelStore:
    """Holds the documents produced by one or more sequential parses.

    A store may be shared to merge several inputs, but each namespace is
    written by at most one parse at a time.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, DocumentGraph] = {}

    def create_document(self, namespace: str, overwrite: bool = False) -> DocumentGraph:
        """Create an empty document graph for ``namespace``.

        Args:
            namespace: Document namespace URI.
            overwrite: Replace an existing document instead of failing.

        Returns:
            The new DocumentGraph.

        Raises:
            DuplicateNamespaceError: If the namespace exists and
                ``overwrite`` is false.
        """
        if namespace in self._documents:
            if not overwrite:
                raise DuplicateNamespaceError(
                    f"A document with namespace {namespace} already exists"
                )
            logger.info("Replacing existing document %s", namespace)
        graph = DocumentGraph(namespace)
        self._documents[namespace] = graph
        return graph

    def put_document(self, graph: DocumentGraph) -> None:
        """Register an existing graph under its namespace, replacing any other."""
        self._documents[graph.namespace] = graph

    def get_document(self, namespace: str) -> Optional[DocumentGraph]:
        return self._documents.get(namespace)

    def has_document(self, namespace: str) -> bool:
        return namespace in self._documents

    def remove_document(self, namespace: str) -> None:
        self._documents.pop(namespace, None)

    def namespaces(self) -> List[str]:
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)
