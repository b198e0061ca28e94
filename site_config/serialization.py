"""Dump a SiteConfig back to its YAML or JSON wire format."""

import json
from pathlib import Path

import yaml

from utils.errors import SerializationError

from .schemas import SiteConfig

FORMATS = ("yaml", "json")

_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


def format_for_path(path: str | Path) -> str:
    """Pick the wire format from a file suffix."""
    suffix = Path(path).suffix.lower()
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise SerializationError(
            f"Unsupported config file suffix '{suffix}' for {path}; "
            f"expected one of {sorted(_SUFFIX_FORMATS)}"
        ) from None


def dump_yaml(config: SiteConfig) -> str:
    return yaml.safe_dump(
        config.to_mapping(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def dump_json(config: SiteConfig, indent: int = 2) -> str:
    return json.dumps(config.to_mapping(), indent=indent, ensure_ascii=False) + "\n"


def dumps(config: SiteConfig, fmt: str = "yaml") -> str:
    """Serialize config as "yaml" or "json"."""
    if fmt == "yaml":
        return dump_yaml(config)
    if fmt == "json":
        return dump_json(config)
    raise SerializationError(f"Unsupported format '{fmt}'; expected one of {FORMATS}")


def write_config(config: SiteConfig, path: str | Path) -> Path:
    """Write config to path in the format implied by its suffix."""
    target = Path(path)
    text = dumps(config, format_for_path(target))
    target.write_text(text, encoding="utf-8")
    return target
