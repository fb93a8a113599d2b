"""
Configuration settings for POMASA.

This module provides a settings class for POMASA, with support for loading
configuration from TOML files and environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

# Repository root; the bundled framework data lives next to the package
_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Main settings class for POMASA.

    This class handles loading configuration from TOML files and environment variables,
    with support for custom settings sources.
    """

    model_config = SettingsConfigDict(
        toml_file=["settings.toml", "settings.custom.toml"], env_prefix="POMASA_", extra="ignore"
    )

    # Server settings
    port: int = 3001
    host: str = "127.0.0.1"
    root_url: str = "/"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Frontend settings
    frontend_enabled: bool = True

    # Framework data: patterns/README.md, user_input_template.md, generator.md
    data_dir: Path = _PROJECT_ROOT / "data"

    # File tree settings
    ignored_directories: list[str] = ["node_modules", "__pycache__"]

    # Pattern catalog settings
    catalog_cache: bool = True
    catalog_strict: bool = False

    # Native dialog settings
    dialog_timeout: float = 600.0

    # Agent settings
    agent_timeout: float | None = None
    agent_permission_mode: str = "acceptEdits"

    # Logging settings
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str | None = None  # If None, will use {data_dir}/../logs
    log_rotation: str = "20 MB"
    log_retention: str = "1 week"
    log_format: str | None = None  # Use default if None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the sources for settings.

        Priority order: explicit init arguments, environment variables, then TOML config files
        """
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls)

    @property
    def patterns_dir(self) -> Path:
        """Directory holding the pattern catalog and per-pattern documents."""
        return self.data_dir / "patterns"

    @property
    def catalog_path(self) -> Path:
        """Path to the pattern catalog document."""
        return self.patterns_dir / "README.md"

    @property
    def template_path(self) -> Path:
        """Path to the user input template."""
        return self.data_dir / "user_input_template.md"

    @property
    def generator_path(self) -> Path:
        """Path to the generator instructions."""
        return self.data_dir / "generator.md"

    def get_log_dir(self) -> Path:
        """Get the log directory path.

        Returns:
            Path to the log directory. Uses log_dir if specified,
            otherwise a logs directory beside the data directory.
        """
        if self.log_dir:
            return Path(self.log_dir)
        return self.data_dir.parent / "logs"


@lru_cache
def get_settings() -> Settings:
    """Get the settings instance, with caching.

    Returns:
        Cached Settings instance
    """
    return Settings()


# Create a global settings instance for easy imports
settings = get_settings()
