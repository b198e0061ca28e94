# site_config/config_loader.py

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

import yaml
from pydantic import ValidationError

from utils.errors import ConfigError, SerializationError

from .schemas import SiteConfig
from .serialization import format_for_path

CONFIG_PATH_ENV = "SITE_CONFIG_PATH"

logger = logging.getLogger(__name__)

# camelCase wire key -> snake_case attribute
_WIRE_TO_ATTR = {
    field.alias or name: name for name, field in SiteConfig.model_fields.items()
}


def _get_project_root() -> Path:
    """Derive project root from this file's location: site_config/config_loader.py -> project root."""
    return Path(__file__).resolve().parent.parent


def default_config_path() -> Path:
    return _get_project_root() / "config" / "site.yaml"


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into "<dotted.path>: <message>" strings."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        messages.append(f"{location}: {error['msg']}")
    return messages


def parse_site_config(data: Any, source: str = "<memory>") -> SiteConfig:
    """
    Validate raw data into a SiteConfig.

    Args:
        data: Decoded file contents; must be a mapping with camelCase keys.
        source: Label used in error messages.

    Raises:
        ConfigError: If data is not a mapping or fails validation.
    """
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"Configuration at {source} didn't contain a mapping",
            source=source,
            errors=[f"<root>: expected a mapping, got {type(data).__name__}"],
        )
    try:
        return SiteConfig.from_mapping(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid site configuration at {source}",
            source=source,
            errors=format_validation_errors(e),
        ) from e


def load_site_config(config_path: str | Path) -> SiteConfig:
    """
    Read and validate a single YAML or JSON configuration file.

    Does not touch the ConfigLoader cache.

    Raises:
        ConfigError: On a missing/unreadable file, a parse error or invalid data.
    """
    path = Path(config_path)
    source = str(path)

    try:
        fmt = format_for_path(path)
    except SerializationError as e:
        raise ConfigError(str(e), source=source) from e

    try:
        with path.open(encoding="utf-8") as file:
            data = yaml.safe_load(file) if fmt == "yaml" else json.load(file)
    except FileNotFoundError:
        raise ConfigError(
            f"Configuration file not found at path: {source}", source=source
        ) from None
    except OSError as e:
        raise ConfigError(
            f"Cannot read configuration at {source}",
            source=source,
            errors=[str(e)],
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Error parsing configuration YAML at {source}",
            source=source,
            errors=[str(e)],
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Error parsing configuration JSON at {source}",
            source=source,
            errors=[f"line {e.lineno} column {e.colno}: {e.msg}"],
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Encoding error reading configuration at {source}",
            source=source,
            errors=[str(e)],
        ) from e

    return parse_site_config(data, source=source)


class ConfigLoader:
    """
    Process-wide holder of the loaded site configuration.

    The record is read once and shared read-only afterwards.

    Observability:
        - Logs INFO on successful config load with path
        - Logs INFO when the path comes from SITE_CONFIG_PATH
        - Logs ERROR on any load failure (the ConfigError is re-raised)
        - Tracks config_status for status reporting
    """

    _config: ClassVar[SiteConfig | None] = None
    _config_status: ClassVar[str] = "not_loaded"  # "ok", "error"
    _config_path: ClassVar[str | None] = None

    @classmethod
    def load_config(cls, config_path: str | None = None) -> SiteConfig:
        """Load the site configuration if not already loaded.

        Args:
            config_path: Path to the configuration file. If not provided,
                uses SITE_CONFIG_PATH env var or defaults to project_root/config/site.yaml.

        Returns:
            SiteConfig: The loaded, immutable configuration record.

        Raises:
            ConfigError: If the file is missing, unparsable or invalid.
        """
        if cls._config is None:
            # Resolve config path with priority: explicit arg > env var > default
            if config_path is None:
                config_path = os.environ.get(CONFIG_PATH_ENV)
                if config_path:
                    logger.info(
                        "Config path overridden via %s env: %s",
                        CONFIG_PATH_ENV,
                        config_path,
                    )

            if not config_path:
                config_path = str(default_config_path())

            cls._config_path = config_path

            try:
                cls._config = load_site_config(config_path)
            except ConfigError as e:
                cls._config_status = "error"
                logger.error(
                    "Failed to load site configuration: %s",
                    e,
                    extra={"config_path": config_path},
                )
                raise

            cls._config_status = "ok"
            logger.info(
                "Configuration loaded successfully from %s",
                config_path,
                extra={"config_path": config_path},
            )
        return cls._config

    @classmethod
    def get_config_status(cls) -> dict[str, Any]:
        """Return config status, config path and whether a record is loaded."""
        return {
            "config_status": cls._config_status,
            "config_path": cls._config_path,
            "config_loaded": cls._config is not None,
        }

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Retrieves a top-level value from the loaded configuration.

        Args:
            key (str): Wire name ("postsPerPage") or attribute name ("posts_per_page").
            default (Any, optional): Returned when nothing is loaded or the key is unknown.

        Returns:
            Any: The value associated with the key.
        """
        if cls._config is None:
            return default
        name = _WIRE_TO_ATTR.get(key, key)
        if name not in SiteConfig.model_fields:
            return default
        return getattr(cls._config, name)

    @classmethod
    def reset(cls) -> None:
        """Reset the config loader state (useful for testing)."""
        cls._config = None
        cls._config_status = "not_loaded"
        cls._config_path = None
