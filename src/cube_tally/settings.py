from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .datatypes import Limits


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CUBE_TALLY_", env_file=".env", extra="ignore"
    )

    # Per-colour ceilings used by validity mode
    red_limit: int = Field(default=12, ge=0)
    green_limit: int = Field(default=13, ge=0)
    blue_limit: int = Field(default=14, ge=0)

    # Diagnostic paging; None pages by the whole input file
    page_length: int | None = Field(default=None, ge=1)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(
        default=True, description="Also write the trace to a timestamped file"
    )

    def limits(self) -> Limits:
        return Limits(red=self.red_limit, green=self.green_limit, blue=self.blue_limit)


settings = AppSettings()
