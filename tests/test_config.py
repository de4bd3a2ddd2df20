"""Tests for compdocs.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdocs.config import CompDocsConfig, ConfigError, ExampleConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, CompDocsConfig)
    assert config.root == tmp_path.resolve()
    assert config.definitions is None
    assert config.interface_prefix == "Va"
    assert config.tag_prefix == "va-"
    assert config.examples == ExampleConfig()
    assert config.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".compdocs.yml"
    config_file.write_text(
        """
definitions: "dist/components.d.ts"
interface_prefix: "Usa"
tag_prefix: "usa-"
templates_dir: "docs/templates"
examples:
  types: [basic, state]
  framework: "vue"
  include_description: "no"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.definitions == root / "dist/components.d.ts"
    assert config.interface_prefix == "Usa"
    assert config.tag_prefix == "usa-"
    assert config.templates_dir == root / "docs/templates"
    assert config.examples.types == ["basic", "state"]
    assert config.examples.framework == "vue"
    assert config.examples.include_description is False


def test_single_example_type_string_is_accepted(tmp_path: Path) -> None:
    (tmp_path / ".compdocs.yml").write_text("examples:\n  types: all\n", encoding="utf-8")
    assert load_config(tmp_path).examples.types == ["all"]


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".compdocs.yml").write_text("\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.definitions is None
    assert config.examples.framework == "html"


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    (tmp_path / ".compdocs.yml").write_text("definitions: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    (tmp_path / ".compdocs.yml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
