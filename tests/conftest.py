"""Shared fixtures: a complete tag-value document and small builders."""

from __future__ import annotations

from pathlib import Path

import pytest

NAMESPACE = "http://spdx.org/spdxdocs/spdx-example-444504E0-4F89-41D3-9A0C-0305E82C3301"

SAMPLE_DOCUMENT = f"""\
## Document Information
SPDXVersion: SPDX-2.3
DataLicense: CC0-1.0
DocumentNamespace: {NAMESPACE}
DocumentName: SPDX-Tools-v2.0
SPDXID: SPDXRef-DOCUMENT
DocumentComment: <text>This document was created using SPDX 2.0 using licenses from the web site.</text>

## External Document References
ExternalDocumentRef: DocumentRef-spdx-tool-1.2 http://spdx.org/spdxdocs/spdx-tools-v1.2-3F2504E0-4F89-41D3-9A0C-0305E82C3301 SHA1: d6a770ba38583ed4bb4525bd96e50461655d2759

## Creation Information
Creator: Tool: LicenseFind-1.0
Creator: Organization: ExampleCodeInspect ()
Creator: Person: Jane Doe ()
Created: 2010-01-29T18:30:22Z
CreatorComment: <text>This package has been shipped in source and binary form.
The binaries were created with gcc 4.5.1 and expect to link to
compatible system run time libraries.</text>
LicenseListVersion: 3.9

## Annotations
Annotator: Person: Jane Doe ()
AnnotationDate: 2010-01-29T18:30:22Z
AnnotationComment: <text>Document level annotation</text>
AnnotationType: OTHER
SPDXREF: SPDXRef-DOCUMENT

## Relationships
Relationship: SPDXRef-DOCUMENT DESCRIBES SPDXRef-Package
Relationship: SPDXRef-DOCUMENT COPY_OF DocumentRef-spdx-tool-1.2:SPDXRef-ToolsElement

## Package Information
PackageName: glibc
SPDXID: SPDXRef-Package
PackageVersion: 2.11.1
PackageFileName: glibc-2.11.1.tar.gz
PackageSupplier: Person: Jane Doe (jane.doe@example.com)
PackageOriginator: Organization: ExampleCodeInspect (contact@example.com)
PackageDownloadLocation: http://ftp.gnu.org/gnu/glibc/glibc-ports-2.15.tar.gz
PackageVerificationCode: d6a770ba38583ed4bb4525bd96e50461655d2758 (excludes: ./package.spdx)
PackageChecksum: MD5: 624c1abb3664f4b35547e7c73864ad24
PackageChecksum: SHA1: 85ed0817af83a24ad8da68c2b5094de69833983c
PackageHomePage: http://ftp.gnu.org/gnu/glibc
PackageLicenseConcluded: (LGPL-2.0-only OR LicenseRef-1)
PackageLicenseInfoFromFiles: GPL-2.0-only
PackageLicenseInfoFromFiles: LicenseRef-1
PackageLicenseDeclared: (LGPL-2.0-only AND LicenseRef-1)
PackageCopyrightText: <text>Copyright 2008-2010 John Smith</text>
PackageSummary: <text>GNU C library.</text>
PackageDescription: <text>The GNU C Library defines functions that are specified by the ISO C standard.</text>
ExternalRef: SECURITY cpe23Type cpe:2.3:a:pivotal_software:spring_framework:4.1.0:*:*:*:*:*:*:*
ExternalRef: PACKAGE-MANAGER purl pkg:maven/org.apache.jena/apache-jena@3.12.0
ExternalRefComment: This is the external ref for Acme

FileName: ./lib-source/commons-lang3-3.1-sources.jar
SPDXID: SPDXRef-CommonsLangSrc
FileType: ARCHIVE
FileChecksum: SHA1: c2b4e1c67a2d28fced849ee1bb76e7391b93f125
LicenseConcluded: Apache-2.0
LicenseInfoInFile: Apache-2.0
FileCopyrightText: <text>Copyright 2001-2011 The Apache Software Foundation</text>
FileNotice: <text>Apache Commons Lang
Copyright 2001-2011 The Apache Software Foundation</text>
FileContributor: Apache Software Foundation

FileName: ./src/org/spdx/parser/DOAPProject.java
SPDXID: SPDXRef-DoapSource
FileType: SOURCE
FileChecksum: SHA1: 2fd4e1c67a2d28fced849ee1bb76e7391b93eb12
LicenseConcluded: Apache-2.0
LicenseInfoInFile: Apache-2.0
FileCopyrightText: NOASSERTION
FileDependency: ./lib-source/commons-lang3-3.1-sources.jar

## Snippet Information
SnippetSPDXID: SPDXRef-Snippet
SnippetFromFileSPDXID: SPDXRef-DoapSource
SnippetByteRange: 310:420
SnippetLineRange: 5:23
SnippetLicenseConcluded: GPL-2.0-only
LicenseInfoInSnippet: GPL-2.0-only
SnippetCopyrightText: <text>Copyright 2008-2010 John Smith</text>
SnippetName: from linux kernel

## License Information
LicenseID: LicenseRef-1
ExtractedText: <text>/*
 * (c) Copyright 2000, 2001 Hewlett-Packard Development Company, LP
 */</text>
LicenseName: HP License
LicenseCrossReference: http://www.example.com/hp-license, http://www.example.com/hp-license-2
LicenseComment: <text>This is a license comment</text>
"""

# Valid document header; append package/file blocks to build small inputs.
HEADER = f"""\
SPDXVersion: SPDX-2.3
DataLicense: CC0-1.0
DocumentNamespace: {NAMESPACE}
DocumentName: minimal
SPDXID: SPDXRef-DOCUMENT
Creator: Tool: test-suite
Created: 2024-03-01T12:00:00Z
"""

PACKAGE = """\
PackageName: demo
SPDXID: SPDXRef-Package
PackageDownloadLocation: NOASSERTION
"""

SHA1_A = "c2b4e1c67a2d28fced849ee1bb76e7391b93f125"
SHA1_B = "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"


def file_block(name: str, spdx_id: str, sha1: str = SHA1_A, extra: str = "") -> str:
    """Return a FileName block with a valid SHA1 checksum."""
    return (
        f"FileName: {name}\n"
        f"SPDXID: {spdx_id}\n"
        f"FileChecksum: SHA1: {sha1}\n"
        f"{extra}"
    )


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def sample_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.spdx"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
