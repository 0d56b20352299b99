"""Explicit settings for wordnet-graph, loadable from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from wordnet_graph.exceptions import ConfigError
from wordnet_graph.relations import HYPERNYMY_RELATIONS

PACKAGE_LOGGER = "wordnet_graph"


@dataclass(frozen=True, slots=True)
class Settings:
    """Settings shared by a network and the operations run on it."""

    verbose: bool = False
    id_width: int = 8
    hypernym_relations: tuple[str, ...] = HYPERNYMY_RELATIONS


DEFAULT_SETTINGS = Settings()


def load_settings(
    source: str | Path | dict[str, Any] | None = None,
) -> Settings:
    """Load settings from a YAML file, YAML string, or dictionary.

    Args:
        source: Path to a YAML file, YAML text, a parsed mapping, or None
            for the defaults.

    Returns:
        Settings object

    Raises:
        ConfigError: If the content cannot be parsed or holds invalid values
        FileNotFoundError: If a file path is given and does not exist
    """
    if source is None:
        return DEFAULT_SETTINGS

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or _is_file_path(source):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = _load_yaml(f.read())
    else:
        data = _load_yaml(source)

    return _parse_settings(data)


def configure_logging(settings: Settings = DEFAULT_SETTINGS) -> logging.Logger:
    """Set the package logger's level from *settings* and return it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
    return logger


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ConfigError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _parse_settings(data: dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}

    if "verbose" in data:
        if not isinstance(data["verbose"], bool):
            raise ConfigError("Setting 'verbose' must be a boolean")
        kwargs["verbose"] = data["verbose"]

    if "id_width" in data:
        width = data["id_width"]
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ConfigError("Setting 'id_width' must be a positive integer")
        kwargs["id_width"] = width

    if "hypernym_relations" in data:
        rels = data["hypernym_relations"]
        if isinstance(rels, str):
            rels = [rels]
        if not isinstance(rels, list) or not all(isinstance(r, str) for r in rels):
            raise ConfigError(
                "Setting 'hypernym_relations' must be a list of strings"
            )
        if not rels:
            raise ConfigError("Setting 'hypernym_relations' must not be empty")
        kwargs["hypernym_relations"] = tuple(rels)

    return Settings(**kwargs)
