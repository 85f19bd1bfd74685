"""Tests for configuration schema and loader."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from spdx_tagvalue.config import TagValueConfig, load_config


def test_defaults() -> None:
    config = load_config(None)

    assert config.parse.ignore_missing_license_text is False
    assert config.parse.allow_generated_namespace is True
    assert config.parse.lenient_file_types is True
    assert config.serialize.section_headers is True
    assert config.serialize.encoding == "utf-8"


def test_from_dict_ignores_unknown_sections() -> None:
    config = load_config(
        {"parse": {"overwrite_existing": True}, "plugins": {"anything": 1}}
    )

    assert config.parse.overwrite_existing is True
    assert "plugins" not in config.to_dict()


def test_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "tagvalue.toml"
    path.write_text(
        "[parse]\n"
        "ignore_missing_license_text = true\n"
        'generated_namespace_prefix = "https://example.com/spdx/"\n'
        "\n"
        "[serialize]\n"
        "section_headers = false\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.parse.ignore_missing_license_text is True
    assert config.parse.generated_namespace_prefix == "https://example.com/spdx/"
    assert config.serialize.section_headers is False


def test_json_file_round_trip(tmp_path: Path) -> None:
    original = TagValueConfig.default()
    original.serialize.encoding = "latin-1"
    path = tmp_path / "tagvalue.json"
    path.write_text(json.dumps(original.to_dict()), encoding="utf-8")

    assert load_config(str(path)) == original


def test_inline_strings() -> None:
    assert load_config('{"parse": {"lenient_file_types": false}}').parse.lenient_file_types is False
    assert load_config("[serialize]\nsection_headers = false\n").serialize.section_headers is False


def test_invalid_namespace_prefix() -> None:
    with pytest.raises(ValidationError):
        load_config({"parse": {"generated_namespace_prefix": "not-a-uri"}})


def test_invalid_encoding() -> None:
    with pytest.raises(ValidationError):
        load_config({"serialize": {"encoding": "no-such-codec"}})


def test_inline_toml_table_is_not_json() -> None:
    config = load_config("[parse]\nlenient_file_types = false\n")

    assert config.parse.lenient_file_types is False


def test_non_mapping_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_unknown_suffix_is_sniffed(tmp_path: Path) -> None:
    path = tmp_path / "tagvalue.conf"
    path.write_text('{"serialize": {"section_headers": false}}', encoding="utf-8")

    assert load_config(path).serialize.section_headers is False


def test_unsupported_source_type() -> None:
    with pytest.raises(TypeError):
        load_config(42)
