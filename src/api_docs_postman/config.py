"""Documentation configuration.

Every recognised option is declared here with its default, so callers read
fields instead of looking up dotted keys.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConfigError(ValueError):
    """Raised when a configuration file is unreadable or has invalid values."""


class AuthConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    in_: str | None = Field(default=None, alias="in")  # basic / bearer / header / query ...
    name: str | None = None  # key name for apikey schemes


class PostmanConfig(BaseModel):
    base_url: str | None = None


class DocumentationConfig(BaseModel):
    """Options that shape the generated Postman collection."""

    base_url: str | None = None
    title: str | None = None
    description: str | None = ""
    app_name: str = "Application"
    app_url: str | None = None  # application root, used when no base URL is configured
    auth: AuthConfig = Field(default_factory=AuthConfig)
    postman: PostmanConfig = Field(default_factory=PostmanConfig)

    @property
    def collection_base_url(self) -> str | None:
        """Base URL for the collection: the Postman override, else the general one."""
        return self.postman.base_url or self.base_url


def load_config(file_path: Path | None = None) -> DocumentationConfig:
    """Load configuration from a YAML file. No path means all defaults."""
    if file_path is None:
        return DocumentationConfig()

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{file_path}: not valid YAML ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{file_path}: expected a mapping of options")

    # Accept configs exported with a top-level "scribe:" section
    if isinstance(data.get("scribe"), dict):
        data = data["scribe"]

    try:
        return DocumentationConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"{file_path}: invalid configuration\n{e}") from e
