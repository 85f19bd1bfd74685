"""Tests for canonical tag-value serialization."""

import io

import pytest

from conftest import HEADER, NAMESPACE, PACKAGE, SHA1_A, file_block
from spdx_tagvalue.config.schema import SerializeConfig, TagValueConfig
from spdx_tagvalue.export.tagvalue import (
    SerializationError,
    TagValueSerializer,
    export_tag_value,
    serialize_tag_value,
)
from spdx_tagvalue.model.enums import ChecksumAlgorithm, ElementKind
from spdx_tagvalue.model.graph import DocumentGraph
from spdx_tagvalue.tagvalue_store import TagValueStore, parse_tag_value

BLAKE2B_384 = "a" * 96


def reserialize(data: bytes) -> bytes:
    return serialize_tag_value(parse_tag_value(data).graph)


def test_sample_document_is_stable(sample_document: str) -> None:
    """Serializing a re-parsed serialization reproduces the same bytes."""
    first = serialize_tag_value(parse_tag_value(sample_document).graph)

    assert reserialize(first) == first


def test_reparse_preserves_structure(sample_document: str) -> None:
    original = parse_tag_value(sample_document).graph
    graph = parse_tag_value(serialize_tag_value(original)).graph

    assert graph.namespace == NAMESPACE
    assert graph.describes() == original.describes()
    assert [f.spdx_id for f in graph.files_of("SPDXRef-Package")] == [
        "SPDXRef-CommonsLangSrc",
        "SPDXRef-DoapSource",
    ]
    package, expected = graph.get_entity("SPDXRef-Package"), original.get_entity("SPDXRef-Package")
    assert package.verification_code == expected.verification_code
    assert package.copyright_text == expected.copyright_text
    assert sorted(r.locator for r in package.external_refs) == sorted(
        r.locator for r in expected.external_refs
    )
    assert graph.get_entity("SPDXRef-Snippet") == original.get_entity("SPDXRef-Snippet")
    assert graph.get_entity("LicenseRef-1") == original.get_entity("LicenseRef-1")
    # Creators are written in sorted order.
    assert graph.document.creation_info.creators == sorted(
        original.document.creation_info.creators
    )


def test_section_order(sample_document: str) -> None:
    text = serialize_tag_value(parse_tag_value(sample_document).graph).decode("utf-8")
    headers = [line for line in text.splitlines() if line.startswith("## ")]

    assert headers == [
        "## Document Information",
        "## External Document References",
        "## Creation Information",
        "## Annotations",
        "## Relationships",
        "## Snippet Information",
        "## Package Information",
        "## Extracted Licenses",
    ]


def test_headers_can_be_disabled(sample_document: str) -> None:
    graph = parse_tag_value(sample_document).graph

    text = serialize_tag_value(graph, SerializeConfig(section_headers=False)).decode("utf-8")

    assert not any(line.startswith("#") for line in text.splitlines())
    assert text.startswith("SPDXVersion: SPDX-2.3\n")


def test_dashed_checksum_algorithm() -> None:
    text = HEADER + PACKAGE + file_block(
        "./a.c", "SPDXRef-a", extra=f"FileChecksum: BLAKE2b-384: {BLAKE2B_384}\n"
    )

    data = serialize_tag_value(parse_tag_value(text).graph).decode("utf-8")

    assert f"FileChecksum: BLAKE2b-384: {BLAKE2B_384}" in data
    reparsed = parse_tag_value(data).graph.get_entity("SPDXRef-a")
    assert {cs.algorithm for cs in reparsed.checksums} == {
        ChecksumAlgorithm.BLAKE2b_384,
        ChecksumAlgorithm.SHA1,
    }


def test_copyright_sentinels_are_not_wrapped() -> None:
    text = HEADER + PACKAGE.replace(
        "PackageDownloadLocation", "PackageCopyrightText: NOASSERTION\nPackageDownloadLocation"
    ) + file_block("./a.c", "SPDXRef-a", extra="FileCopyrightText: Copyright 2024 Someone\n")

    data = serialize_tag_value(parse_tag_value(text).graph).decode("utf-8")

    assert "PackageCopyrightText: NOASSERTION" in data
    assert "FileCopyrightText: <text>Copyright 2024 Someone</text>" in data


def test_multiline_text_round_trips() -> None:
    text = HEADER + PACKAGE + (
        "PackageDescription: <text>first line\nsecond line</text>\n"
    )

    data = serialize_tag_value(parse_tag_value(text).graph).decode("utf-8")

    assert "PackageDescription: <text>first line\nsecond line</text>" in data
    package = parse_tag_value(data).graph.get_entity("SPDXRef-Package")
    assert package.description == "first line\nsecond line"


def test_files_analyzed_written_only_when_false() -> None:
    analyzed = serialize_tag_value(parse_tag_value(HEADER + PACKAGE).graph).decode("utf-8")
    skipped = serialize_tag_value(
        parse_tag_value(HEADER + PACKAGE + "FilesAnalyzed: false\n").graph
    ).decode("utf-8")

    assert "FilesAnalyzed" not in analyzed
    assert "FilesAnalyzed: false" in skipped


def test_document_level_files_come_before_packages() -> None:
    text = HEADER + file_block("./loose.c", "SPDXRef-loose") + PACKAGE + file_block(
        "./owned.c", "SPDXRef-owned"
    )

    data = serialize_tag_value(parse_tag_value(text).graph).decode("utf-8")
    graph = parse_tag_value(data).graph

    assert data.index("FileName: ./loose.c") < data.index("PackageName: demo")
    assert data.index("PackageName: demo") < data.index("FileName: ./owned.c")
    assert graph.package_of("SPDXRef-loose") is None
    assert graph.package_of("SPDXRef-owned").spdx_id == "SPDXRef-Package"


def test_cross_references_one_per_line(sample_document: str) -> None:
    data = serialize_tag_value(parse_tag_value(sample_document).graph).decode("utf-8")

    assert "LicenseCrossReference: http://www.example.com/hp-license\n" in data
    assert "LicenseCrossReference: http://www.example.com/hp-license-2\n" in data


def test_nameless_package_cannot_be_written() -> None:
    graph = DocumentGraph(NAMESPACE)
    graph.create_entity(ElementKind.PACKAGE, "SPDXRef-Package")

    with pytest.raises(SerializationError, match="has no name"):
        TagValueSerializer(graph).serialize()


def test_unsupported_node_kind_cannot_be_written() -> None:
    graph = DocumentGraph(NAMESPACE)
    graph.graph.add_node("SPDXRef-Odd", kind="mystery", entity=object())

    with pytest.raises(SerializationError, match="unsupported kind"):
        TagValueSerializer(graph).serialize()


def test_export_writes_file(tmp_path) -> None:
    graph = parse_tag_value(HEADER + PACKAGE).graph
    output = tmp_path / "out" / "doc.spdx"

    export_tag_value(graph, output)

    assert output.read_bytes() == serialize_tag_value(graph)


def test_store_serialize_to_stream(sample_document: str) -> None:
    store = TagValueStore(TagValueConfig.from_dict({"serialize": {"section_headers": False}}))
    namespace = store.deserialize(sample_document)
    stream = io.BytesIO()

    data = store.serialize(namespace, stream)

    assert stream.getvalue() == data
    assert b"## " not in data
    assert store.warnings == []


def test_store_serialize_unknown_namespace() -> None:
    with pytest.raises(KeyError):
        TagValueStore().serialize("http://example.com/missing")


def test_checksum_order_is_canonical() -> None:
    text = HEADER + PACKAGE + (
        "FileName: ./a.c\n"
        "SPDXID: SPDXRef-a\n"
        "FileChecksum: MD5: 624c1abb3664f4b35547e7c73864ad24\n"
        f"FileChecksum: SHA1: {SHA1_A}\n"
    )

    data = serialize_tag_value(parse_tag_value(text).graph).decode("utf-8")

    assert data.index("FileChecksum: MD5") < data.index("FileChecksum: SHA1")


def test_describes_order_survives_reserialization() -> None:
    text = HEADER + (
        "Relationship: SPDXRef-DOCUMENT DESCRIBES SPDXRef-B\n"
        "Relationship: SPDXRef-DOCUMENT DESCRIBES SPDXRef-A\n"
        "PackageName: aaa\n"
        "SPDXID: SPDXRef-A\n"
        "PackageDownloadLocation: NOASSERTION\n"
        "PackageName: bbb\n"
        "SPDXID: SPDXRef-B\n"
        "PackageDownloadLocation: NOASSERTION\n"
    )

    first = reserialize(text.encode("utf-8"))
    data = first.decode("utf-8")

    assert reserialize(first) == first
    assert data.index("PackageName: bbb") < data.index("PackageName: aaa")
    assert data.index("DESCRIBES SPDXRef-B") < data.index("DESCRIBES SPDXRef-A")
    assert parse_tag_value(first).graph.describes() == ["SPDXRef-B", "SPDXRef-A"]


def test_relationship_from_extracted_license_is_written() -> None:
    text = HEADER + PACKAGE + (
        "LicenseID: LicenseRef-1\n"
        "ExtractedText: <text>custom terms</text>\n"
        "Relationship: LicenseRef-1 OTHER SPDXRef-Package\n"
    )

    data = serialize_tag_value(parse_tag_value(text).graph)

    assert b"Relationship: LicenseRef-1 OTHER SPDXRef-Package\n" in data
    reparsed = parse_tag_value(data).graph
    assert [
        (r.relationship_type.value, r.target_id) for r in reparsed.relationships_of("LicenseRef-1")
    ] == [("OTHER", "SPDXRef-Package")]
    assert reserialize(data) == data
