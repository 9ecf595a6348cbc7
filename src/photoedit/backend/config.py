"""Configuration management module"""
import os
from pathlib import Path
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

INSTANCE_PATH_ENV = "PHOTOEDIT_INSTANCE_PATH"


def get_instance_path() -> Path:
    """Get the current instance path from environment or default"""
    instance_path = os.environ.get(INSTANCE_PATH_ENV)
    if instance_path:
        return Path(instance_path).expanduser()
    return Path.home() / ".photoedit"


def get_config_file(instance_path: Path | str | None = None) -> Path | None:
    """Get config file path if it exists

    Args:
        instance_path: Instance directory, defaults to get_instance_path()
    """
    if instance_path is None:
        instance_path = get_instance_path()
    config_file = Path(instance_path).expanduser() / "config.toml"
    if config_file.exists():
        return config_file
    return None


class Settings(BaseSettings):
    """System configuration settings"""

    # Application basic configuration
    app_name: str = "AI Photo Editor"
    app_version: str = "0.1.0"
    debug: bool = False

    instance_path: Path = Field(default_factory=get_instance_path)

    # Database configuration (defaults to {instance_path}/data/photoedit.db)
    database_url: str | None = None

    # Server configuration
    server_host: str = "0.0.0.0"
    server_port: int = 2022

    # CORS configuration
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="PHOTOEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def resolved_database_url(self) -> str:
        """Database URL with the instance default applied"""
        if self.database_url:
            return self.database_url
        return f"sqlite+aiosqlite:///{self.instance_path / 'data' / 'photoedit.db'}"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML file"""
        # An explicit instance_path wins over the environment
        config_file = get_config_file(init_settings.init_kwargs.get("instance_path"))
        if config_file:
            toml_settings = TomlConfigSettingsSource(
                settings_cls, toml_file=config_file
            )
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                toml_settings,
                file_secret_settings,
            )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
