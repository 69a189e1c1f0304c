"""Configuration loading and validation for the optional btconnect YAML file."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from btconnect.core.errors import ConfigError
from btconnect.core.model import Settings

LOGGER = logging.getLogger(__name__)


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise ConfigError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


def default_config_path() -> Path:
    return Path.home() / ".config" / "btconnect" / "config.yaml"


def _load_schema_validator() -> Any:
    schema_text = resources.files("btconnect.schemas").joinpath("config.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    # An empty file is a valid, empty configuration.
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at root")
    return loaded


def _build_settings(doc: dict[str, Any], source: Path) -> Settings:
    validator = _load_schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ConfigError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    defaults = Settings()
    return Settings(
        executable=doc.get("executable", defaults.executable),
        audio_command=tuple(doc.get("audio_command", defaults.audio_command)),
        fuzzy_threshold=float(doc.get("fuzzy_threshold", defaults.fuzzy_threshold)),
        color=doc.get("color", defaults.color),
    )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path``, or from the default location when omitted.

    An explicit path must exist. The default file is optional and its
    absence yields the built-in defaults.
    """
    if path is None:
        path = default_config_path()
        if not path.is_file():
            LOGGER.debug("No config file at %s; using defaults", path)
            return Settings()
    elif not path.is_file():
        raise ConfigError(f"Config file {path} does not exist")

    LOGGER.debug("Loading config from %s", path)
    return _build_settings(_read_yaml(path), path)
