"""Tests for deferred resolution of forward references."""

import pytest

from conftest import HEADER, PACKAGE, SHA1_B, file_block
from spdx_tagvalue.config.schema import ParseConfig
from spdx_tagvalue.model.enums import ElementKind, RelationshipType
from spdx_tagvalue.model.graph import DocumentGraph
from spdx_tagvalue.model.schema import Range
from spdx_tagvalue.parsers.diagnostics import WarningCollector
from spdx_tagvalue.parsers.errors import SequencingError, TagValueFormatError
from spdx_tagvalue.parsers.resolver import (
    DEFAULT_DESCRIBES_COMMENT,
    DeferredResolver,
    DeferredTables,
)
from spdx_tagvalue.tagvalue_store import parse_tag_value


def snippet_block(spdx_id: str, from_file: str, byte_range: str = "1:10", extra: str = "") -> str:
    return (
        f"SnippetSPDXID: {spdx_id}\n"
        f"SnippetFromFileSPDXID: {from_file}\n"
        f"SnippetByteRange: {byte_range}\n"
        f"{extra}"
    )


def test_file_dependency_declared_before_target() -> None:
    text = HEADER + PACKAGE + file_block(
        "./a.c", "SPDXRef-a", extra="FileDependency: ./b.c\n"
    ) + file_block("./b.c", "SPDXRef-b", SHA1_B)

    graph = parse_tag_value(text).graph

    assert [f.spdx_id for f in graph.dependencies_of("SPDXRef-a")] == ["SPDXRef-b"]


def test_file_dependency_declared_after_target() -> None:
    text = HEADER + PACKAGE + file_block("./b.c", "SPDXRef-b", SHA1_B) + file_block(
        "./a.c", "SPDXRef-a", extra="FileDependency: ./b.c\n"
    )

    graph = parse_tag_value(text).graph

    assert [f.spdx_id for f in graph.dependencies_of("SPDXRef-a")] == ["SPDXRef-b"]


def test_dangling_file_dependency_warns_once() -> None:
    text = HEADER + PACKAGE + file_block(
        "./a.c", "SPDXRef-a", extra="FileDependency: ./missing.c\n"
    )

    result = parse_tag_value(text)

    messages = [m for m in result.warnings if "listed as file dependencies" in m]
    assert len(messages) == 1
    assert "\t./missing.c" in messages[0]
    assert result.graph.dependencies_of("SPDXRef-a") == []


def test_snippet_from_later_file_gets_ranges() -> None:
    text = HEADER + PACKAGE + snippet_block(
        "SPDXRef-s", "SPDXRef-a", "310:420", extra="SnippetLineRange: 5:23\n"
    ) + file_block("./a.c", "SPDXRef-a")

    graph = parse_tag_value(text).graph

    snippet = graph.get_entity("SPDXRef-s")
    assert graph.snippet_from_file("SPDXRef-s").spdx_id == "SPDXRef-a"
    assert snippet.byte_range == Range(start=310, end=420)
    assert snippet.line_range == Range(start=5, end=23)


def test_dangling_snippet_file_warns() -> None:
    text = HEADER + PACKAGE + snippet_block("SPDXRef-s", "SPDXRef-nowhere")

    result = parse_tag_value(text)

    assert any(
        "listed as snippet from files" in m and "\tSPDXRef-nowhere" in m
        for m in result.warnings
    )
    assert result.graph.snippet_from_file("SPDXRef-s") is None


def test_malformed_snippet_range_is_fatal_at_its_line() -> None:
    text = HEADER + PACKAGE + file_block("./a.c", "SPDXRef-a") + snippet_block(
        "SPDXRef-s", "SPDXRef-a", "ten:twenty"
    )
    range_line = text.splitlines().index("SnippetByteRange: ten:twenty") + 1

    with pytest.raises(TagValueFormatError) as excinfo:
        parse_tag_value(text)

    assert excinfo.value.line_number == range_line
    assert excinfo.value.tag == "SnippetByteRange"


def test_dangling_relationship_target_is_dropped() -> None:
    text = HEADER + PACKAGE + "Relationship: SPDXRef-Package DEPENDS_ON SPDXRef-Ghost\n"
    rel_line = text.count("\n")

    result = parse_tag_value(text)

    assert (
        f"Invalid related element reference in relationship: SPDXRef-Ghost "
        f"at line number {rel_line}"
    ) in result.warnings
    assert result.graph.relationships_of("SPDXRef-Package") == []


def test_relationship_source_declared_later() -> None:
    text = HEADER + "Relationship: SPDXRef-Package CONTAINS SPDXRef-a\n" + PACKAGE + file_block(
        "./a.c", "SPDXRef-a"
    )

    graph = parse_tag_value(text).graph

    rels = graph.relationships_of("SPDXRef-Package")
    assert [(r.relationship_type, r.target_id) for r in rels] == [
        (RelationshipType.CONTAINS, "SPDXRef-a")
    ]


def test_external_document_element_is_mounted() -> None:
    text = HEADER + (
        "ExternalDocumentRef: DocumentRef-other http://example.com/other "
        f"SHA1: {SHA1_B}\n"
        "Relationship: SPDXRef-DOCUMENT COPY_OF DocumentRef-other:SPDXRef-Thing\n"
        "Relationship: SPDXRef-DOCUMENT COPY_OF DocumentRef-unknown:SPDXRef-Thing\n"
    ) + PACKAGE

    result = parse_tag_value(text)

    assert result.graph.kind_of("DocumentRef-other:SPDXRef-Thing") == ElementKind.EXTERNAL
    assert not result.graph.exists("DocumentRef-unknown:SPDXRef-Thing")
    assert any("DocumentRef-unknown:SPDXRef-Thing" in m for m in result.warnings)


def test_default_describes_for_single_package() -> None:
    result = parse_tag_value(HEADER + PACKAGE)

    rels = result.graph.relationships_of("SPDXRef-DOCUMENT")
    assert len(rels) == 1
    assert rels[0].relationship_type == RelationshipType.DESCRIBES
    assert rels[0].target_id == "SPDXRef-Package"
    assert rels[0].comment == DEFAULT_DESCRIBES_COMMENT


def test_explicit_describes_is_kept() -> None:
    text = HEADER + "Relationship: SPDXRef-DOCUMENT DESCRIBES SPDXRef-a\n" + file_block(
        "./a.c", "SPDXRef-a"
    )

    graph = parse_tag_value(text).graph

    assert graph.describes() == ["SPDXRef-a"]
    assert graph.relationships_of("SPDXRef-DOCUMENT")[0].comment is None


def test_no_packages_and_no_describes_is_fatal() -> None:
    with pytest.raises(SequencingError, match="no packages"):
        parse_tag_value(HEADER + file_block("./a.c", "SPDXRef-a"))


def test_two_packages_and_no_describes_is_fatal() -> None:
    second = PACKAGE.replace("demo", "other").replace("SPDXRef-Package", "SPDXRef-Other")

    with pytest.raises(SequencingError, match="2 packages"):
        parse_tag_value(HEADER + PACKAGE + second)


def test_annotation_without_spdxref_warns() -> None:
    text = HEADER + PACKAGE + (
        "Annotator: Person: Jane\n"
        "AnnotationDate: 2024-03-01T12:00:00Z\n"
        "AnnotationComment: <text>orphan</text>\n"
        "AnnotationType: OTHER\n"
    )

    result = parse_tag_value(text)

    assert any(m.startswith("missing SPDXREF: tag in annotation orphan") for m in result.warnings)


def test_annotation_with_unknown_spdxref_warns() -> None:
    text = HEADER + PACKAGE + (
        "Annotator: Person: Jane\n"
        "AnnotationDate: 2024-03-01T12:00:00Z\n"
        "AnnotationComment: <text>lost</text>\n"
        "AnnotationType: OTHER\n"
        "SPDXREF: SPDXRef-Ghost\n"
    )

    result = parse_tag_value(text)

    assert any(
        "Invalid element reference in annotation: SPDXRef-Ghost" in m
        for m in result.warnings
    )


def test_annotation_may_reference_later_element() -> None:
    text = HEADER + (
        "Annotator: Person: Jane\n"
        "AnnotationDate: 2024-03-01T12:00:00Z\n"
        "AnnotationComment: <text>early</text>\n"
        "AnnotationType: OTHER\n"
        "SPDXREF: SPDXRef-Package\n"
    ) + PACKAGE

    graph = parse_tag_value(text).graph

    assert graph.get_entity("SPDXRef-Package").annotations[0].comment == "early"


def test_verification_warnings_carry_element_line() -> None:
    text = HEADER + PACKAGE + "FileName: ./a.c\nSPDXID: SPDXRef-a\n"
    file_line = text.splitlines().index("FileName: ./a.c") + 1

    result = parse_tag_value(text)

    assert (
        f"File SPDXRef-a at line {file_line} invalid: Missing required SHA1 checksum"
    ) in result.warnings


def test_ignore_missing_license_text_filters_only_that_message() -> None:
    text = HEADER + PACKAGE + "LicenseID: bad-id\n"

    strict = parse_tag_value(text)
    lenient = parse_tag_value(text, config=ParseConfig(ignore_missing_license_text=True))

    assert any("Missing required license text" in m for m in strict.warnings)
    assert not any("Missing required license text" in m for m in lenient.warnings)
    assert any("must start with LicenseRef-" in m for m in lenient.warnings)


def test_sample_document_resolves_cleanly(sample_document: str) -> None:
    result = parse_tag_value(sample_document)
    graph = result.graph

    assert result.warnings == []
    assert graph.describes() == ["SPDXRef-Package"]
    assert [f.spdx_id for f in graph.files_of("SPDXRef-Package")] == [
        "SPDXRef-CommonsLangSrc",
        "SPDXRef-DoapSource",
    ]
    assert [f.spdx_id for f in graph.dependencies_of("SPDXRef-DoapSource")] == [
        "SPDXRef-CommonsLangSrc"
    ]
    assert graph.snippet_from_file("SPDXRef-Snippet").spdx_id == "SPDXRef-DoapSource"
    assert graph.kind_of("DocumentRef-spdx-tool-1.2:SPDXRef-ToolsElement") == ElementKind.EXTERNAL
    assert graph.document.annotations[0].comment == "Document level annotation"


def test_resolver_runs_once() -> None:
    graph = DocumentGraph("http://example.com/once")
    graph.create_entity(ElementKind.PACKAGE, "SPDXRef-Package").name = "p"
    resolver = DeferredResolver(graph, DeferredTables(), WarningCollector())

    resolver.resolve()

    with pytest.raises(RuntimeError):
        resolver.resolve()
