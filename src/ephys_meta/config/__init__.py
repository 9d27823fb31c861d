"""Application settings for ephys-meta.

Settings control logging and the lab-specific values new documents are
seeded with. They are resolved from, highest priority first:

1. Environment variables (``EPHYS_META_`` prefix, ``__`` for nesting)
2. Values from an optional TOML file passed to ``load_settings``
3. Field defaults

Example TOML:
-------------
    [logging]
    level = "DEBUG"

    [defaults]
    lab = "Loren Frank Lab"
    institution = "University of California, San Francisco"
    species = "Rattus norvegicus"

Usage:
------
>>> from ephys_meta.config import load_settings, new_document
>>> settings = load_settings("ephys_meta.toml")
>>> doc = new_document(settings)
>>> doc["lab"]
'Loren Frank Lab'

Environment override:
    $ EPHYS_META_LOGGING__LEVEL=DEBUG ephys-meta validate session.yml
"""

import logging
from pathlib import Path
import tomllib
from typing import Any, Dict, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ..domain.defaults import array_template, empty_document
from ..exceptions import ConfigError

__all__ = [
    "VALID_LOGGING_LEVELS",
    "LoggingConfig",
    "DocumentDefaults",
    "Settings",
    "load_settings",
    "new_document",
]

logger = logging.getLogger(__name__)

VALID_LOGGING_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: str = "INFO"
    structured: bool = False

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOGGING_LEVELS:
            raise ValueError(f"Invalid logging.level: {value}. Must be one of {sorted(VALID_LOGGING_LEVELS)}")
        return level


class DocumentDefaults(BaseModel):
    """Lab-specific values used to seed new session documents.

    Empty strings leave the corresponding document field at its default.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    lab: str = ""
    institution: str = ""
    species: str = ""
    subject_description: str = ""
    data_acq_device: Dict[str, str] = Field(
        default_factory=lambda: array_template("data_acq_device"),
        description="Acquisition device entry added to new documents (empty to omit)",
    )


class Settings(BaseSettings):
    """ephys-meta settings (environment overrides TOML overrides defaults)."""

    model_config = SettingsConfigDict(
        env_prefix="EPHYS_META_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="forbid",
        frozen=True,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DocumentDefaults = Field(default_factory=DocumentDefaults)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Environment wins over values loaded from TOML
        return env_settings, init_settings


def load_settings(toml_path: Optional[Union[Path, str]] = None) -> Settings:
    """Load settings from an optional TOML file plus the environment.

    Args:
        toml_path: Path to a TOML settings file (None for env/defaults only)

    Returns:
        Validated Settings instance

    Raises:
        FileNotFoundError: If toml_path is given but does not exist
        ConfigError: If the file is not valid TOML or violates the schema
    """
    data: Dict[str, Any] = {}

    if toml_path is not None:
        path = Path(toml_path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in settings file {path}: {e}") from e

        logger.debug(f"Loaded settings from {path}")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def new_document(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Create an empty session document seeded with lab defaults.

    Args:
        settings: Settings to seed from (loaded from the environment if None)

    Returns:
        Fresh session document
    """
    settings = settings or load_settings()
    defaults = settings.defaults
    document = empty_document()

    if defaults.lab:
        document["lab"] = defaults.lab
    if defaults.institution:
        document["institution"] = defaults.institution
    if defaults.species:
        document["subject"]["species"] = defaults.species
    if defaults.subject_description:
        document["subject"]["description"] = defaults.subject_description
    if defaults.data_acq_device:
        document["data_acq_device"] = [dict(defaults.data_acq_device)]

    return document
