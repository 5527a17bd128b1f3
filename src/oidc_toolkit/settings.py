"""
oidc_toolkit.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven defaults for the CLI and logging setup.
- Offer a cached settings instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from oidc_toolkit.auth.models import DEFAULT_AUTHENTICATION_TYPE, DEFAULT_ISSUER


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OIDC_TOOLKIT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "oidc-toolkit"
    log_level: str = "WARNING"

    # Claims
    default_authentication_type: str = Field(default=DEFAULT_AUTHENTICATION_TYPE, min_length=1)
    claims_issuer: str = DEFAULT_ISSUER


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Library functions never read settings implicitly; they take explicit keyword
# arguments. Only the CLI resolves its defaults from here.
