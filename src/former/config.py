"""Configuration management for former using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from former.registry import FIELDSPACE

CONFIG_FILE_NAME = ".former.json"


class FormType(str, Enum):
    """Form layouts understood by the framework strategies."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    INLINE = "inline"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class IconConfig(BaseModel):
    """Icon settings overriding the framework defaults."""
    prefix: str | None = None
    icon_set: str | None = Field(alias="set", default=None)
    tag: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    def as_settings(self) -> dict[str, str]:
        """Settings that were explicitly configured."""
        settings = {"prefix": self.prefix, "set": self.icon_set, "tag": self.tag}
        return {key: value for key, value in settings.items() if value is not None}


class ColumnsConfig(BaseModel):
    """Column classes used by horizontal forms."""
    label: str = "col-sm-2"
    field: str = "col-sm-10"


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class FormerConfig(BaseModel):
    """Complete former configuration model."""
    framework: str = "TwitterBootstrap3"
    form_type: FormType = Field(alias="formType", default=FormType.VERTICAL)
    live_validation: bool = Field(alias="liveValidation", default=True)
    error_messages: bool = Field(alias="errorMessages", default=True)
    automatic_label: bool = Field(alias="automaticLabel", default=True)
    required_class: str = Field(alias="requiredClass", default="required")
    fields_repositories: list[str] = Field(
        alias="fieldsRepositories",
        default_factory=lambda: [FIELDSPACE]
    )
    columns: ColumnsConfig = Field(default_factory=ColumnsConfig)
    icons: IconConfig = Field(default_factory=IconConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("fields_repositories", mode="before")
    @classmethod
    def coerce_repositories(cls, v):
        """Accept a single repository as well as a list."""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("framework")
    @classmethod
    def validate_framework(cls, v):
        if not v.strip():
            raise ValueError("framework must not be empty")
        return v.strip()

    model_config = ConfigDict(extra="forbid", populate_by_name=True, use_enum_values=True)


def load_config(config_path: str | Path | None = None) -> FormerConfig:
    """Read a JSON configuration file.

    Without a path, the nearest ``.former.json`` above the working directory
    is used. Defaults apply when there is no file at all.

    Raises:
        ValueError: If the file cannot be read, is not JSON or does not
            describe a valid configuration
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.exists():
        return create_default_config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Failed to load config from {path}: expected a JSON object")

    try:
        return FormerConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest ``.former.json`` in ``start_dir`` (default: cwd) or its parents."""
    start = Path(start_dir or Path.cwd()).resolve()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

    return None


def create_default_config() -> FormerConfig:
    return FormerConfig()
