"""Environment driven settings for the hook helpers."""

from typing import Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HookSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DISPATCH_HOOKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum level of the log records written to stdout.",
        examples=["DEBUG", "INFO"],
    )

    LOG_RESOURCE: str = Field(
        default="",
        description="Logical resource name prefixed to every log line.",
        examples=["", "billing"],
    )

    PREHOOKS: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Action type to 'module:function' references run before dispatch.",
        examples=[{"INCREMENT": ["myapp.hooks:audit"]}],
    )

    POSTHOOKS: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Action type to 'module:function' references run after dispatch.",
        examples=[{"INCREMENT": ["myapp.hooks:notify"]}],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        return value.upper()


__all__ = ["HookSettings"]
