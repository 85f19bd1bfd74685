"""Read and write tag-value documents through a model store.

``parse_tag_value`` runs the tokenizer, builder and resolver over one input;
``TagValueStore`` is a ModelStore that can deserialize documents into itself
and serialize any of them back to tag-value bytes.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Dict, Iterable, List, Optional, TextIO, Union

from spdx_tagvalue.config.schema import ParseConfig, SerializeConfig, TagValueConfig
from spdx_tagvalue.export.tagvalue import TagValueSerializer
from spdx_tagvalue.model.graph import DocumentGraph
from spdx_tagvalue.model.store import ModelStore
from spdx_tagvalue.parsers.builder import ParseResult, TagValueBuilder
from spdx_tagvalue.parsers.tokenizer import LineTokenizer

logger = logging.getLogger("spdx_tagvalue.tagvalue_store")

TagValueSource = Union[str, bytes, TextIO, BinaryIO, Iterable[str]]


def _lines(source: TagValueSource, encoding: str = "utf-8") -> Iterable[str]:
    if isinstance(source, bytes):
        return source.decode(encoding).splitlines()
    if isinstance(source, str):
        return source.splitlines()
    if isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
        return io.TextIOWrapper(source, encoding=encoding)
    return source


def _discard_partial(
    store: ModelStore,
    graph: Optional[DocumentGraph],
    previous: Dict[str, DocumentGraph],
) -> None:
    """Drop the document a failed parse created, restoring any it replaced."""
    if graph is None or store.get_document(graph.namespace) is not graph:
        return
    store.remove_document(graph.namespace)
    replaced = previous.get(graph.namespace)
    if replaced is not None:
        store.put_document(replaced)
    logger.debug("Discarded partial document %s", graph.namespace)


def parse_tag_value(
    source: TagValueSource,
    store: Optional[ModelStore] = None,
    config: Optional[ParseConfig] = None,
) -> ParseResult:
    """Parse one tag-value document into ``store``.

    A fatal error leaves ``store`` as it was before the call.

    Args:
        source: Document text, bytes, an open file or an iterable of lines.
        store: Store receiving the document; a private one is used if omitted.
        config: Parse options.

    Returns:
        ParseResult with the namespace, the document graph and the
        deduplicated warnings.

    Raises:
        TagValueError: On any fatal syntax, sequencing or format error.
    """
    builder = TagValueBuilder(store=store, config=config)
    previous = {
        namespace: builder.store.get_document(namespace)
        for namespace in builder.store.namespaces()
    }
    try:
        LineTokenizer(builder).tokenize(_lines(source))
    except Exception:
        _discard_partial(builder.store, builder.graph, previous)
        raise
    assert builder.result is not None
    logger.info(
        "Parsed document %s with %d warning(s)",
        builder.result.namespace,
        len(builder.result.warnings),
    )
    return builder.result


class TagValueStore(ModelStore):
    """Model store with tag-value (de)serialization."""

    def __init__(self, config: Optional[TagValueConfig] = None) -> None:
        super().__init__()
        self.config = config or TagValueConfig.default()
        self.warnings: List[str] = []

    def deserialize(self, source: TagValueSource) -> str:
        """Parse a document into this store.

        Returns:
            Namespace of the new document. Warnings of the parse are kept
            in ``warnings``.
        """
        result = parse_tag_value(source, store=self, config=self.config.parse)
        self.warnings = result.warnings
        return result.namespace

    def serialize(
        self,
        namespace: str,
        stream: Optional[BinaryIO] = None,
        config: Optional[SerializeConfig] = None,
    ) -> bytes:
        """Write a held document as tag-value bytes.

        Args:
            namespace: Namespace of the document to write.
            stream: Optional binary stream that also receives the bytes.
            config: Overrides the store's serialization options.

        Returns:
            The encoded document.

        Raises:
            KeyError: If the store holds no document for ``namespace``.
            SerializationError: If the document cannot be expressed.
        """
        graph = self.get_document(namespace)
        if graph is None:
            raise KeyError(f"No document with namespace {namespace}")
        data = TagValueSerializer(graph, config or self.config.serialize).to_bytes()
        if stream is not None:
            stream.write(data)
        return data
