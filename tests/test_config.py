"""Tests for genconf.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from genconf.config import AnswersConfig, ConfigError, GenConfSettings, OutputConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GenConfSettings)
    assert config.root == tmp_path.resolve()
    assert config.answers == AnswersConfig()
    assert config.output == OutputConfig()


def test_load_config_returns_defaults_when_empty(tmp_path: Path) -> None:
    (tmp_path / ".genconf.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).answers.strict is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".genconf.yml"
    config_file.write_text(
        """
answers:
  affirmative: "yes"
  negative: "no"
  strict: true
output:
  path: "out/config.yaml"
  format: "YAML"
  indent: 4
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.answers == AnswersConfig(affirmative="yes", negative="no", strict=True)
    assert config.output.path == tmp_path.resolve() / "out" / "config.yaml"
    assert config.output.format == "yaml"
    assert config.output.indent == 4


def test_load_config_accepts_custom_file_name(tmp_path: Path) -> None:
    config_file = tmp_path / "wizard.yml"
    config_file.write_text("answers:\n  strict: 'true'\n", encoding="utf-8")

    assert load_config(config_file).answers.strict is True


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- just\n- a list\n", "must contain a mapping"),
        ("answers: [unclosed\n", "Failed to parse"),
        ("output:\n  format: toml\n", "output.format must be one of"),
        ("answers:\n  affirmative: n\n", "must differ"),
        ("answers:\n  negative: 'no way'\n", "single non-empty token"),
    ],
)
def test_load_config_rejects_invalid_files(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / ".genconf.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_load_config_rejects_non_utf8_file(tmp_path: Path) -> None:
    (tmp_path / ".genconf.yml").write_bytes(b"answers:\n  affirmative: \xff\xfe\n")

    with pytest.raises(ConfigError, match="Failed to read .genconf.yml"):
        load_config(tmp_path)


def test_load_config_rejects_unreadable_path(tmp_path: Path) -> None:
    config_dir = tmp_path / "nested"
    config_dir.mkdir()
    (config_dir / ".genconf.yml").mkdir()

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(config_dir)
