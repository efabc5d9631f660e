from enum import Enum
from typing import Literal

from pydantic import model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from swarmconsole.utils.settings_utils import DockerSecretsSettingsSource


class GeneralConfig(BaseSettings):
    APP_TITLE: str = "SwarmConsole API"
    APP_VERSION: str = "1.0.0"
    REVISION: str = "dev"
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = ""


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class LoggingConfig(BaseSettings):
    LOG_FORMAT: LogFormat = LogFormat.JSON
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class AuthConfig(BaseSettings):
    JWT_SECRET: str = "swarmconsole-jwt-secret-change-in-production"
    JWT_ALGORITHM: Literal["HS256", "HS384", "HS512"] = "HS256"
    JWT_ISSUER: str = "swarmconsole"
    JWT_EXPIRATION_SECONDS: int = 60 * 60 * 24 * 7

    SLT_EXPIRATION_SECONDS: int = 60
    """Lifetime of the short-lived token handed out by the `slt` route"""


class RegistryProbeConfig(BaseSettings):
    DOCKERHUB_URL: str = "https://hub.docker.com"
    REGISTRY_PROBE_TIMEOUT_SECONDS: float = 10.0
    REGISTRY_VERIFY_SSL: bool = True


class CollaboratorConfig(BaseSettings):
    CLUSTER_API_FACTORY: str = ""
    """Dotted `module:callable` path returning the cluster API facade"""

    STATS_FACTORY: str = ""
    """Dotted `module:callable` path returning the statistics source"""


class Settings(
    AuthConfig,
    CollaboratorConfig,
    GeneralConfig,
    LoggingConfig,
    RegistryProbeConfig,
    BaseSettings,
):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.prod", ".env.test"),
        extra="allow",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """
        Define the priority order for settings sources.

        Priority (highest to lowest):
        1. Docker secrets from files (reads *_FILE env vars)
        2. Environment variables
        3. .env files
        4. Default values
        """
        return (
            init_settings,
            DockerSecretsSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @model_validator(mode="after")
    def validate_slt_shorter_than_jwt(self):
        if self.SLT_EXPIRATION_SECONDS > self.JWT_EXPIRATION_SECONDS:
            raise ValueError(
                "SLT_EXPIRATION_SECONDS must not exceed JWT_EXPIRATION_SECONDS"
            )
        return self


settings = Settings()
