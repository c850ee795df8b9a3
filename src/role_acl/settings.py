"""Settings for :mod:`role_acl`, loaded with `pydantic-settings`.

Precedence, highest first: explicit kwargs, ``ROLE_ACL_*`` environment
variables, ``.env``, a flat ``settings.toml``, defaults. Both files are read
from the working directory, or from ``cwd`` when using :meth:`Settings.load`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, TomlConfigSettingsSource

from role_acl.models.events import LOG_FORMATS

ENV_PREFIX = "ROLE_ACL_"
_TOML_KWARG = "_acl_toml_file"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_file=".env", extra="ignore")

    log_format: str = "text"
    log_level: int = logging.INFO
    audit_events: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _level_from_name(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip().isdigit():
            level = logging.getLevelNamesMapping().get(value.strip().upper())
            if level is None:
                raise ValueError(f"unknown log level {value!r}")
            return level
        return value

    @field_validator("log_format", mode="before")
    @classmethod
    def _known_format(cls, value: Any) -> str:
        fmt = str(value).strip().lower()
        fmt = "ndjson" if fmt == "json" else fmt
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}")
        return fmt

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        init_kwargs = getattr(init_settings, "init_kwargs", {})
        toml_file = init_kwargs.get(_TOML_KWARG) or Path.cwd() / "settings.toml"
        toml_settings = TomlConfigSettingsSource(settings_cls, toml_file=toml_file)
        return init_settings, env_settings, dotenv_settings, toml_settings, file_secret_settings

    @classmethod
    def load(cls, *, cwd: Path | None = None, **overrides: Any) -> "Settings":
        """Load settings with ``settings.toml`` and ``.env`` taken from ``cwd``."""

        root = (cwd or Path.cwd()).expanduser().resolve()
        overrides[_TOML_KWARG] = root / "settings.toml"
        return cls(_env_file=root / ".env", **overrides)


__all__ = ["ENV_PREFIX", "Settings"]
