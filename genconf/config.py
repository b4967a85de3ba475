"""Configuration loading for genconf (.genconf.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".genconf.yml"
OUTPUT_FORMATS: tuple[str, ...] = ("json", "yaml")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AnswersConfig:
    """Tokens that answer the y/n questions, and how strictly they are checked."""

    affirmative: str = "y"
    negative: str = "n"
    strict: bool = False


@dataclass
class OutputConfig:
    """Where and how the finished document is written."""

    path: Optional[Path] = None
    format: str = "json"
    indent: Optional[int] = None


@dataclass
class GenConfSettings:
    """Represents the settings defined in .genconf.yml."""

    root: Path
    answers: AnswersConfig = field(default_factory=AnswersConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> GenConfSettings:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GenConfSettings(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    answers_data = _as_dict(data.get("answers"))
    answers = AnswersConfig()
    if answers_data:
        answers.affirmative = _as_str(answers_data.get("affirmative")) or answers.affirmative
        answers.negative = _as_str(answers_data.get("negative")) or answers.negative
        answers.strict = _as_bool(answers_data.get("strict")) or False
    if not _is_single_token(answers.affirmative):
        raise ConfigError("answers.affirmative must be a single non-empty token")
    if not _is_single_token(answers.negative):
        raise ConfigError("answers.negative must be a single non-empty token")
    if answers.affirmative == answers.negative:
        raise ConfigError("answers.affirmative and answers.negative must differ")

    output_data = _as_dict(data.get("output"))
    output = OutputConfig()
    if output_data:
        path_str = _as_str(output_data.get("path"))
        output.path = root / path_str if path_str else None
        output.format = (_as_str(output_data.get("format")) or output.format).lower()
        output.indent = _as_int(output_data.get("indent"))
    if output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)} (got {output.format!r})"
        )

    return GenConfSettings(root=root, answers=answers, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _is_single_token(value: str) -> bool:
    return len(value.split()) == 1 and value.strip() == value


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "AnswersConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "GenConfSettings",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "load_config",
]
