import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flopapi.constants import (
    CONFIG_PATHS,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_VIEW_UPDATE_TIMEOUT_SECONDS,
    LOG_LEVELS,
)

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    pocketbase_url: str

    @field_validator("pocketbase_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("pocketbase_url is required")
        return value.rstrip("/")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    config_path: Path | None = Field(default=None, alias="FLOPAPI_CONFIG_PATH")
    image_dir: Path = Field(default=Path("./floppa"), alias="IMAGE_DIR")
    frontend_dist: Path = Field(default=Path("./frontend/dist"), alias="FRONTEND_DIST")
    collection: str = Field(default="macky", alias="POCKETBASE_COLLECTION")

    http_timeout_seconds: float = Field(default=DEFAULT_HTTP_TIMEOUT_SECONDS, alias="HTTP_TIMEOUT_SECONDS")
    view_update_timeout_seconds: float = Field(
        default=DEFAULT_VIEW_UPDATE_TIMEOUT_SECONDS, alias="VIEW_UPDATE_TIMEOUT_SECONDS"
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @model_validator(mode="after")
    def validate_runtime(self) -> "Settings":
        if not self.collection.strip():
            raise ValueError("POCKETBASE_COLLECTION is required")
        if self.http_timeout_seconds <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be > 0")
        if self.view_update_timeout_seconds <= 0:
            raise ValueError("VIEW_UPDATE_TIMEOUT_SECONDS must be > 0")
        if not 0 < self.port < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")
        return self

    def candidate_config_paths(self) -> list[Path]:
        paths = [Path(path) for path in CONFIG_PATHS]
        if self.config_path is not None:
            paths.insert(0, self.config_path)
        return paths


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def load_config(paths: Iterable[str | Path] = CONFIG_PATHS) -> AppConfig:
    """Read the JSON config from the first candidate path that opens.

    Raises ConfigError when no candidate is readable or the document does not
    look like ``{"pocketbase_url": "..."}``.
    """
    last_error: OSError | None = None
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                raw = handle.read()
        except OSError as exc:
            last_error = exc
            continue

        logger.info("Loading config from: %s", path)
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"failed to decode {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ConfigError(f"failed to decode {path}: expected a JSON object")
        try:
            return AppConfig.model_validate(payload)
        except ValidationError as exc:
            raise ConfigError(f"invalid config in {path}: {exc}") from exc

    raise ConfigError(f"failed to open config.json in any location: {last_error}")
