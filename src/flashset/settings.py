from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Settings(BaseSettings):
    """Settings merged from CLI, environment, .env and ``flashset.yaml``."""

    model_config = SettingsConfigDict(
        env_prefix="FLASHSET__",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="flashset.yaml",
        extra="ignore",
        cli_prog_name="flashset",
    )

    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the sets backend",
    )
    token: SecretStr | None = Field(
        default=None,
        description="Bearer token sent with every backend request",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Total timeout in seconds per request; unset waits indefinitely",
    )

    import_file: Path | None = Field(
        default=None,
        description="JSON or CSV file to import as a new set",
    )
    import_content_type: str | None = Field(
        default=None,
        description="Declared MIME type of the import file; guessed from its name if unset",
    )

    export_set_id: str | None = Field(
        default=None,
        description="Id of the set to export",
    )
    export_format: Literal["json", "csv"] = Field(
        default="json",
        description="Export file format",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Directory the exported file is written to",
    )

    show_formats: bool = Field(
        default=False,
        description="Print the supported import formats and exit",
    )
    log_level: str = Field(default="INFO", description="Logging level")

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
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def token_value(self) -> str | None:
        return self.token.get_secret_value() if self.token else None
