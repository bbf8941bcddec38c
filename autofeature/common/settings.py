# autofeature/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from autofeature.common.strings.splitters import csv_to_list
from autofeature.domain.enums.resolution_policy import ResolutionPolicy


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "autofeature"
    user: str = "autofeature"
    password: str = "autofeature"
    schema_name: str = Field(
        default="autofeature",
        validation_alias=AliasChoices("DB_SCHEMA", "schema_name", "schema"),
    )
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url", "url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class ResolverConfig(BaseModel):
    """Featured-image resolution knobs."""
    policy: ResolutionPolicy = ResolutionPolicy.first_match
    title_prefix_word: str = "active"   # titles look like "active tag sunset ..."
    meta_key: str = "_thumbnail_id"
    mime_type: str = "image"            # matched as "image/%"
    attachment_status: str = "inherit"
    lookup_limit: int = Field(1, ge=1, le=100, description="Rows fetched per slug lookup")
    hook_priority: int = Field(5, description="transition_post_status priority; lower runs first")
    publish_status: str = "publish"

    @field_validator("policy", mode="before")
    @classmethod
    def _normalize_policy(cls, v):
        if isinstance(v, str):
            return ResolutionPolicy.parse(v)
        return v


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "autofeature"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"
    tz: str = "UTC"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    resolver: ResolverConfig = ResolverConfig()

    # -------- Alembic / migrations --------
    alembic_script_location: str = "autofeature/database/alembic"
    alembic_version_table_schema: str = "public"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> str:
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from autofeature.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
