"""Tag names of the tag-value format, grouped by the context they belong to."""

# =============================================================================
# Document creation and document-level tags
# =============================================================================

SPDX_VERSION = "SPDXVersion"
DATA_LICENSE = "DataLicense"
DOCUMENT_NAMESPACE = "DocumentNamespace"
DOCUMENT_NAME = "DocumentName"
SPDX_ID = "SPDXID"
DOCUMENT_COMMENT = "DocumentComment"
EXTERNAL_DOCUMENT_REF = "ExternalDocumentRef"
CREATOR = "Creator"
CREATED = "Created"
CREATOR_COMMENT = "CreatorComment"
LICENSE_LIST_VERSION = "LicenseListVersion"

# Legacy review information, converted to REVIEW annotations
REVIEWER = "Reviewer"
REVIEW_DATE = "ReviewDate"
REVIEW_COMMENT = "ReviewComment"

RELATIONSHIP = "Relationship"
RELATIONSHIP_COMMENT = "RelationshipComment"

# =============================================================================
# Annotations
# =============================================================================

ANNOTATOR = "Annotator"
ANNOTATION_DATE = "AnnotationDate"
ANNOTATION_COMMENT = "AnnotationComment"
ANNOTATION_TYPE = "AnnotationType"
ANNOTATION_SPDX_REF = "SPDXREF"

# =============================================================================
# Packages
# =============================================================================

PACKAGE_NAME = "PackageName"
PACKAGE_VERSION = "PackageVersion"
PACKAGE_FILE_NAME = "PackageFileName"
PACKAGE_SUPPLIER = "PackageSupplier"
PACKAGE_ORIGINATOR = "PackageOriginator"
PACKAGE_DOWNLOAD_LOCATION = "PackageDownloadLocation"
FILES_ANALYZED = "FilesAnalyzed"
PACKAGE_VERIFICATION_CODE = "PackageVerificationCode"
PACKAGE_CHECKSUM = "PackageChecksum"
PACKAGE_HOMEPAGE = "PackageHomePage"
PACKAGE_SOURCE_INFO = "PackageSourceInfo"
PACKAGE_LICENSE_CONCLUDED = "PackageLicenseConcluded"
PACKAGE_LICENSE_INFO_FROM_FILES = "PackageLicenseInfoFromFiles"
PACKAGE_LICENSE_DECLARED = "PackageLicenseDeclared"
PACKAGE_LICENSE_COMMENTS = "PackageLicenseComments"
PACKAGE_COPYRIGHT_TEXT = "PackageCopyrightText"
PACKAGE_SUMMARY = "PackageSummary"
PACKAGE_DESCRIPTION = "PackageDescription"
PACKAGE_COMMENT = "PackageComment"
PACKAGE_ATTRIBUTION_TEXT = "PackageAttributionText"
EXTERNAL_REF = "ExternalRef"
EXTERNAL_REF_COMMENT = "ExternalRefComment"
PRIMARY_PACKAGE_PURPOSE = "PrimaryPackagePurpose"
RELEASE_DATE = "ReleaseDate"
BUILT_DATE = "BuiltDate"
VALID_UNTIL_DATE = "ValidUntilDate"

# =============================================================================
# Files
# =============================================================================

FILE_NAME = "FileName"
FILE_TYPE = "FileType"
FILE_CHECKSUM = "FileChecksum"
FILE_LICENSE_CONCLUDED = "LicenseConcluded"
FILE_LICENSE_INFO = "LicenseInfoInFile"
FILE_LICENSE_COMMENTS = "LicenseComments"
FILE_COPYRIGHT_TEXT = "FileCopyrightText"
FILE_COMMENT = "FileComment"
FILE_NOTICE = "FileNotice"
FILE_CONTRIBUTOR = "FileContributor"
FILE_DEPENDENCY = "FileDependency"
FILE_ATTRIBUTION_TEXT = "FileAttributionText"

# Legacy DOAP project references, converted to synthetic packages
ARTIFACT_OF_PROJECT_NAME = "ArtifactOfProjectName"
ARTIFACT_OF_PROJECT_HOMEPAGE = "ArtifactOfProjectHomePage"
ARTIFACT_OF_PROJECT_URI = "ArtifactOfProjectURI"

# =============================================================================
# Snippets
# =============================================================================

SNIPPET_SPDX_ID = "SnippetSPDXID"
SNIPPET_FROM_FILE_ID = "SnippetFromFileSPDXID"
SNIPPET_BYTE_RANGE = "SnippetByteRange"
SNIPPET_LINE_RANGE = "SnippetLineRange"
SNIPPET_LICENSE_CONCLUDED = "SnippetLicenseConcluded"
SNIPPET_LICENSE_INFO = "LicenseInfoInSnippet"
SNIPPET_LICENSE_COMMENTS = "SnippetLicenseComments"
SNIPPET_COPYRIGHT_TEXT = "SnippetCopyrightText"
SNIPPET_COMMENT = "SnippetComment"
SNIPPET_NAME = "SnippetName"
SNIPPET_ATTRIBUTION_TEXT = "SnippetAttributionText"

# =============================================================================
# Extracted licenses
# =============================================================================

LICENSE_ID = "LicenseID"
EXTRACTED_TEXT = "ExtractedText"
LICENSE_NAME = "LicenseName"
LICENSE_CROSS_REFERENCE = "LicenseCrossReference"
LICENSE_COMMENT = "LicenseComment"

# =============================================================================
# Tag sets per context
# =============================================================================

# Allowed before DocumentNamespace has been seen.
PRE_NAMESPACE_TAGS = frozenset({SPDX_VERSION, DATA_LICENSE, DOCUMENT_NAME, SPDX_ID})

# Accepted in every context; some of them open a new context.
DOCUMENT_TAGS = frozenset(
    {
        SPDX_VERSION,
        DATA_LICENSE,
        DOCUMENT_NAMESPACE,
        DOCUMENT_NAME,
        SPDX_ID,
        DOCUMENT_COMMENT,
        EXTERNAL_DOCUMENT_REF,
        CREATOR,
        CREATED,
        CREATOR_COMMENT,
        LICENSE_LIST_VERSION,
        REVIEWER,
        REVIEW_DATE,
        REVIEW_COMMENT,
        RELATIONSHIP,
        RELATIONSHIP_COMMENT,
        ANNOTATOR,
        PACKAGE_NAME,
        FILE_NAME,
        SNIPPET_SPDX_ID,
        LICENSE_ID,
    }
)

ANNOTATION_TAGS = frozenset(
    {ANNOTATION_DATE, ANNOTATION_COMMENT, ANNOTATION_TYPE, ANNOTATION_SPDX_REF}
)

PACKAGE_TAGS = frozenset(
    {
        SPDX_ID,
        PACKAGE_VERSION,
        PACKAGE_FILE_NAME,
        PACKAGE_SUPPLIER,
        PACKAGE_ORIGINATOR,
        PACKAGE_DOWNLOAD_LOCATION,
        FILES_ANALYZED,
        PACKAGE_VERIFICATION_CODE,
        PACKAGE_CHECKSUM,
        PACKAGE_HOMEPAGE,
        PACKAGE_SOURCE_INFO,
        PACKAGE_LICENSE_CONCLUDED,
        PACKAGE_LICENSE_INFO_FROM_FILES,
        PACKAGE_LICENSE_DECLARED,
        PACKAGE_LICENSE_COMMENTS,
        PACKAGE_COPYRIGHT_TEXT,
        PACKAGE_SUMMARY,
        PACKAGE_DESCRIPTION,
        PACKAGE_COMMENT,
        PACKAGE_ATTRIBUTION_TEXT,
        EXTERNAL_REF,
        EXTERNAL_REF_COMMENT,
        PRIMARY_PACKAGE_PURPOSE,
        RELEASE_DATE,
        BUILT_DATE,
        VALID_UNTIL_DATE,
    }
)

FILE_TAGS = frozenset(
    {
        SPDX_ID,
        FILE_TYPE,
        FILE_CHECKSUM,
        FILE_LICENSE_CONCLUDED,
        FILE_LICENSE_INFO,
        FILE_LICENSE_COMMENTS,
        FILE_COPYRIGHT_TEXT,
        FILE_COMMENT,
        FILE_NOTICE,
        FILE_CONTRIBUTOR,
        FILE_DEPENDENCY,
        FILE_ATTRIBUTION_TEXT,
        ARTIFACT_OF_PROJECT_NAME,
        ARTIFACT_OF_PROJECT_HOMEPAGE,
        ARTIFACT_OF_PROJECT_URI,
    }
)

SNIPPET_TAGS = frozenset(
    {
        SNIPPET_FROM_FILE_ID,
        SNIPPET_BYTE_RANGE,
        SNIPPET_LINE_RANGE,
        SNIPPET_LICENSE_CONCLUDED,
        SNIPPET_LICENSE_INFO,
        SNIPPET_LICENSE_COMMENTS,
        SNIPPET_COPYRIGHT_TEXT,
        SNIPPET_COMMENT,
        SNIPPET_NAME,
        SNIPPET_ATTRIBUTION_TEXT,
    }
)

EXTRACTED_LICENSE_TAGS = frozenset(
    {EXTRACTED_TEXT, LICENSE_NAME, LICENSE_CROSS_REFERENCE, LICENSE_COMMENT}
)
