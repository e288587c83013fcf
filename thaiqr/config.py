from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings


class CodecSettings(BaseSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", validation_alias="THAIQR_LOG_LEVEL"
    )
    log_ring_size: int = Field(200, gt=0, validation_alias="THAIQR_LOG_RING_SIZE")
    # Mask personal identifiers before they reach the event buffer.
    redact_logs: bool = Field(True, validation_alias="THAIQR_REDACT_LOGS")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> CodecSettings:
    return CodecSettings()
