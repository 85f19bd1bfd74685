"""Tests for structural verification rules."""

from spdx_tagvalue.model.enums import ElementKind
from spdx_tagvalue.model.graph import DocumentGraph
from spdx_tagvalue.model.schema import Checksum, Range
from spdx_tagvalue.model.verify import (
    used_license_refs,
    verify_checksum,
    verify_date,
    verify_entity,
)
from spdx_tagvalue.parsers.diagnostics import WarningCollector


def test_verify_date() -> None:
    assert verify_date("2024-03-01T12:00:00Z", "created date") == []
    assert verify_date(None, "created date") == ["Missing required created date"]
    assert verify_date("2024-03-01", "created date")[0].startswith("Invalid created date")


def test_checksum_length_is_checked() -> None:
    assert verify_checksum(Checksum(algorithm="SHA256", value="a" * 64)) == []
    assert verify_checksum(Checksum(algorithm="SHA256", value="a" * 40)) == [
        "Invalid SHA256 checksum value " + "a" * 40
    ]
    # Variable-length algorithms only need hex digits.
    assert verify_checksum(Checksum(algorithm="BLAKE3", value="ab" * 7)) == []


def test_empty_document_messages() -> None:
    graph = DocumentGraph("http://example.com/empty")

    messages = verify_entity(graph, graph.document)

    assert "Missing required SPDX version" in messages
    assert "Missing required creators" in messages
    assert "Document does not describe any element" in messages


def test_undefined_license_ref_is_reported() -> None:
    graph = DocumentGraph("http://example.com/licenses")
    package = graph.create_entity(ElementKind.PACKAGE, "SPDXRef-p")
    package.license_concluded = "MIT AND LicenseRef-local AND DocumentRef-x:LicenseRef-remote"

    assert used_license_refs(graph) == {"LicenseRef-local"}
    assert (
        "License LicenseRef-local is used but not defined in the document"
        in verify_entity(graph, graph.document)
    )


def test_snippet_rules() -> None:
    graph = DocumentGraph("http://example.com/snippets")
    snippet = graph.create_entity(ElementKind.SNIPPET, "SPDXRef-s")
    snippet.line_range = Range(start=9, end=3)

    messages = verify_entity(graph, snippet)

    assert messages == [
        "Missing snippet from file",
        "Missing required byte range",
        "Invalid line range 9:3; start is greater than end",
    ]


def test_package_with_files_must_be_analyzed() -> None:
    graph = DocumentGraph("http://example.com/analyzed")
    package = graph.create_entity(ElementKind.PACKAGE, "SPDXRef-p")
    package.name, package.download_location = "p", "NOASSERTION"
    package.files_analyzed = False
    graph.create_entity(ElementKind.FILE, "SPDXRef-f")
    graph.add_file_to_package("SPDXRef-p", "SPDXRef-f")

    assert verify_entity(graph, package) == [
        "Package contains files but FilesAnalyzed is false"
    ]


def test_warning_collector_deduplicates() -> None:
    collector = WarningCollector()

    collector.add("same")
    collector.add("same")
    collector.extend(["other", "same"])

    assert collector.messages == ["same", "other"]
    assert len(collector) == 2
    assert list(collector) == ["same", "other"]
