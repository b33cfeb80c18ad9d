import logging
import re
from functools import lru_cache
from os import environ
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)
from pydantic_settings.sources import PathType
from typing_extensions import override

from discord_guild.core.typing import DIGITS_PATTERN


logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ExtendedSettingsConfigDict(SettingsConfigDict, total=False):
    toml_file_section: str | None
    """Section of the TOML file to use when filling variables."""


class ConfigSection(BaseSettings):
    """Base class for all configuration sections."""

    GENERAL_PREFIX: ClassVar[str] = "DGC_"
    CONFIG_FILE_ENV: ClassVar[str] = GENERAL_PREFIX + "CONFIG_FILE"
    CONFIG_FILE_DEFAULT: ClassVar[str] = ".config.toml"

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            SectionedTomlConfigSettingsSource(cls, toml_file=cls.get_config_file()),
            file_secret_settings,
        )

    @classmethod
    def get_config_file(cls) -> str:
        return environ.get(cls.CONFIG_FILE_ENV) or cls.CONFIG_FILE_DEFAULT

    def log_defaults(self) -> None:
        """Log fields that use their default values."""
        for field_name, field_info in type(self).model_fields.items():
            current_value = getattr(self, field_name)

            if current_value == field_info.default:
                logger.debug("Default used for '%s'", field_name)
            elif isinstance(current_value, ConfigSection):
                logger.debug("Checking nested model: %s", field_name)
                current_value.log_defaults()


class GeneralConfig(ConfigSection):
    """General application configuration."""

    model_config = ExtendedSettingsConfigDict(
        env_prefix=f"{ConfigSection.GENERAL_PREFIX}APP_",
        toml_file_section="general",
        extra="ignore",
    )

    name: str = Field(default="discord-guild")
    version: str = Field(default="0.1.0")
    log_level: LogLevel = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


class DiscordConfig(ConfigSection):
    """Bot credentials and the guild the client is bound to."""

    model_config = ExtendedSettingsConfigDict(
        env_prefix=f"{ConfigSection.GENERAL_PREFIX}DISCORD_", toml_file_section="discord", extra="ignore"
    )

    # From the discord application's "Bot" page
    bot_token: str = Field(default="")
    guild_id: str = Field(default="0")
    api_url: str = Field(default="https://discord.com/api/v10")
    request_timeout: float = Field(default=30.0, gt=0)

    @field_validator("guild_id")
    @classmethod
    def validate_guild_id(cls, value: str) -> str:
        if not re.fullmatch(DIGITS_PATTERN, value):
            raise ValueError("Guild ID should be a numeric snowflake")
        return value

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("Discord API URL should start with http:// or https://")
        return value.rstrip("/")


class AppConfig(BaseModel):
    """Application configuration root."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    discord: DiscordConfig = Field(default_factory=DiscordConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the application configuration.

    Uses a singleton pattern with lazy loading.

    Returns:
        The application configuration
    """
    config = AppConfig()
    logger.info("Config loaded.")
    return config


class SectionedTomlConfigSettingsSource(TomlConfigSettingsSource):
    """Source of configuration from TOML with section support."""

    DEFAULT_PATH: ClassVar[Path] = Path()

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        toml_file: PathType | None = DEFAULT_PATH,
        section: str | None = None,
    ) -> None:
        self.toml_file_path = (
            toml_file if toml_file != self.DEFAULT_PATH else settings_cls.model_config.get("toml_file")
        )
        self.section = section or settings_cls.model_config.get("toml_file_section")
        self.toml_data = self._read_files(self.toml_file_path)
        if self.section:
            self.toml_data = self.toml_data.get(self.section, {})
        super(TomlConfigSettingsSource, self).__init__(settings_cls, self.toml_data)
