import logging
from pathlib import Path

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# fixed by the declared schema, Equipment.items always holds this many item ids
EQUIPMENT_SLOT_COUNT = 5


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore", validate_assignment=True)

    PLAYER_STATE_SERVICE_VERSION: str = Field(
        "dev",
        min_length=1,
        validation_alias=AliasChoices("PLAYER_STATE_SERVICE_VERSION", "PLAYER_STATE_SERVICE_IMAGE_RELEASE_VERSION"),
    )
    PLAYER_STATE_SERVICE_LOG_LEVEL: int = Field(20, ge=0, le=50)
    PLAYER_STATE_SERVICE_DEBUG_MODE: bool = Field(False)

    PLAYER_STATE_SERVICE_HOST: str = Field("127.0.0.1", min_length=1)
    PLAYER_STATE_SERVICE_PORT: int = Field(8080, ge=1, le=65535)

    PLAYER_STATE_SERVICE_MAX_SWORD_LEVEL: int = Field(20, ge=0)
    PLAYER_STATE_SERVICE_SWORD_SLOT: int = Field(2, ge=0, lt=EQUIPMENT_SLOT_COUNT)

    @field_validator("PLAYER_STATE_SERVICE_MAX_SWORD_LEVEL")
    @classmethod
    def warn_unbounded_sword_level(cls, value: int) -> int:
        if value > 100:
            logging.warning(
                "PLAYER_STATE_SERVICE_MAX_SWORD_LEVEL=%s is unusually high; sword level checks are effectively off.",
                value,
            )
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def LOG_LEVEL(self) -> int:
        # 50 - CRITICAL, 40 - ERROR, 30 - WARNING, 20 - INFO, 10 - DEBUG, 0 - NOTSET
        return self.PLAYER_STATE_SERVICE_LOG_LEVEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def DEBUG_MODE(self) -> bool:
        return self.PLAYER_STATE_SERVICE_DEBUG_MODE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ROOT_DIR(self) -> str:
        return str(Path(__file__).resolve().parents[1])

    @computed_field  # type: ignore[prop-decorator]
    @property
    def HOST(self) -> str:
        return self.PLAYER_STATE_SERVICE_HOST

    @computed_field  # type: ignore[prop-decorator]
    @property
    def PORT(self) -> int:
        return self.PLAYER_STATE_SERVICE_PORT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def MAX_SWORD_LEVEL(self) -> int:
        return self.PLAYER_STATE_SERVICE_MAX_SWORD_LEVEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SWORD_SLOT(self) -> int:
        return self.PLAYER_STATE_SERVICE_SWORD_SLOT

settings = Settings() # type: ignore[call-arg]
