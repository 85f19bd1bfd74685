"""Configuration schema definitions using Pydantic for validation.

Parsing and serialization options are grouped into their own models and
combined in TagValueConfig, which is what the loader and the CLI build.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class ParseConfig(BaseModel):
    """Options for reading tag-value text.

    Attributes:
        ignore_missing_license_text: Drop "missing license text" warnings for
            extracted licenses whose text was never supplied.
        allow_generated_namespace: Generate a random namespace for pre-2.0
            documents that never declare one.
        generated_namespace_prefix: URI prefix for generated namespaces.
        overwrite_existing: Replace a document already held by the store
            under the same namespace instead of failing.
        lenient_file_types: Accept lower-case FileType values with a warning.
    """

    ignore_missing_license_text: bool = False
    allow_generated_namespace: bool = True
    generated_namespace_prefix: str = "http://spdx.org/spdxdocs/"
    overwrite_existing: bool = False
    lenient_file_types: bool = True

    model_config = {"extra": "allow"}

    @field_validator("generated_namespace_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Namespaces are URIs, so the prefix must carry a scheme."""
        if "://" not in v:
            raise ValueError(f"Invalid namespace prefix '{v}': expected a URI")
        return v


class SerializeConfig(BaseModel):
    """Options for writing tag-value text.

    Attributes:
        section_headers: Emit ``##`` comment lines between sections.
        encoding: Encoding of the emitted byte stream.
    """

    section_headers: bool = True
    encoding: str = "utf-8"

    model_config = {"extra": "allow"}

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        import codecs

        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding '{v}'") from None
        return v


class TagValueConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        parse: Options for reading tag-value text.
        serialize: Options for writing tag-value text.
    """

    parse: ParseConfig = Field(default_factory=ParseConfig)
    serialize: SerializeConfig = Field(default_factory=SerializeConfig)

    @classmethod
    def default(cls) -> "TagValueConfig":
        """Return a TagValueConfig instance with default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TagValueConfig":
        """Create TagValueConfig from a plain mapping.

        The expected shape matches the TOML layout::

            [parse]
            ignore_missing_license_text = true

            [serialize]
            section_headers = false

        Unknown top-level sections are ignored.
        """
        known: List[str] = list(cls.model_fields)
        return cls.model_validate({k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON/TOML friendly mapping."""
        return self.model_dump()
