"""Application and mod configuration.

``Settings`` holds process-level values loaded from environment variables
and a .env file. ``ModConfig`` is the mod's own ``config.json``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"
    DATABASE_PATH: str = "./database"

    # None이면 패키지에 포함된 data/ 폴더 사용
    MOD_PATH: Optional[str] = None


class ModConfig(BaseModel):
    """config.json 스키마. 모든 필드 필수."""

    model_config = ConfigDict(populate_by_name=True)

    change_loyalty4_rep_requirements: bool = Field(
        ..., alias="changeLoyalty4RepRequirements"
    )
    add_lega_medal_rewards: bool = Field(..., alias="addLegaMedalRewards")
    gp_coin_multiplier: float = Field(..., ge=0, alias="gpCoinMultiplier")


settings = Settings()
