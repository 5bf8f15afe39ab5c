from pathlib import Path
from typing import Annotated, ClassVar, Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from chaincodec.bootstrap.config.loader import get_configfile
from chaincodec.core.models.config import CodecConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    level: Annotated[
        LogLevel,
        Field(
            description="Logging verbosity, one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
            default="INFO"
        )
    ]

    format: Annotated[
        str,
        Field(
            description="Format string handed to logging.basicConfig.",
            default="%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s"
        )
    ]

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class CodecSettings(BaseModel):
    encoding: Annotated[
        str,
        Field(
            description=(
                "Text encoding of ledger payloads.\n"
                "Values are written with it and read back with it, so every\n"
                "chaincode sharing a channel must agree on it."
            ),
            default="utf-8"
        )
    ]

    decode_errors: Annotated[
        Literal["strict", "replace", "ignore", "backslashreplace", "surrogateescape"],
        Field(
            description=(
                "How undecodable bytes are handled when reading payloads.\n"
                "'replace' substitutes U+FFFD and never fails; 'strict' makes\n"
                "corrupted payloads raise UnicodeDecodeError."
            ),
            default="replace"
        )
    ]

    log_parse_fallback: Annotated[
        bool,
        Field(
            description="Log an error whenever a payload is not JSON and is returned as text.",
            default=True
        )
    ]

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            "".encode(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v


class ChaincodecConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHAINCODEC_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    implicit_file: ClassVar[bool] = True

    logging: Annotated[
        LoggingSettings,
        Field(
            description="Logging configuration of the CLI and any host process using setup_logging.",
            default_factory=LoggingSettings
        )
    ]

    codec: Annotated[
        CodecSettings,
        Field(
            description=(
                "Payload codec configuration.\n"
                "Controls how values are encoded into ledger bytes and how those\n"
                "bytes are decoded back."
            ),
            default_factory=CodecSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        if not settings_cls.implicit_file:
            return init_settings, env_settings

        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=get_configfile()),
        )

    @classmethod
    def from_file(cls, path: Path) -> "ChaincodecConfig":
        """
        Load an explicitly requested file. Its values take precedence over
        the environment, and CHAINCODECCONFIG or ./chaincodec.yaml are not
        consulted at all.
        """
        data = yaml.safe_load(path.read_text()) or {}
        return _ExplicitFileConfig(**data)

    def get_codec_config(self) -> CodecConfig:
        return CodecConfig(
            encoding=self.codec.encoding,
            decode_errors=self.codec.decode_errors,
            log_parse_fallback=self.codec.log_parse_fallback,
        )


class _ExplicitFileConfig(ChaincodecConfig):
    implicit_file: ClassVar[bool] = False
