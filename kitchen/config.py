from enum import Enum
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kitchen.domain.chef import DEFAULT_CHEF_NAME


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KITCHEN_")

    env: Env = Env.local
    chef_name: str = DEFAULT_CHEF_NAME
    # None leaves the argument out of reveal_secret_ingredient.
    world_ready: bool | None = None
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
