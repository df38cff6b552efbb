"""Resolver settings and per-call options."""
import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULTS_PATH = "config/defaults.yaml"


class ResolverSettings(BaseSettings):
    """Process-level resolver settings.

    Loaded from ``STRATA_*`` environment variables. ``STRATA_CONFIG`` plays
    the role of a ``-Dconfig`` system property: the environment config path
    used when the caller does not pass one.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config: Optional[str] = Field(
        default=None,
        description="Environment config path override"
    )
    defaults_path: str = Field(
        default=DEFAULTS_PATH,
        description="Well-known path of the defaults document"
    )
    resource_package: Optional[str] = Field(
        default=None,
        description="Package whose bundled files are searched for relative paths"
    )

    @field_validator("config", "resource_package")
    @classmethod
    def blank_as_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("defaults_path")
    @classmethod
    def defaults_path_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("defaults_path must not be blank")
        return v


class ConfigOptions(BaseModel):
    """Options for a single resolution run."""

    config_path: Optional[str] = Field(
        default=None,
        description="Explicit environment config path (wins over STRATA_CONFIG)"
    )
