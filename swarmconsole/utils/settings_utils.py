import os
from pathlib import Path
from typing import Any

import structlog
from pydantic.fields import FieldInfo
from pydantic_settings import PydanticBaseSettingsSource

logger = structlog.stdlib.get_logger(__name__)

SWARM_SECRETS_DIR = Path("/run/secrets")


def secret_file_path(value: str) -> Path:
    """Absolute paths are used as-is, bare names live in the Swarm secrets dir."""
    path = Path(value)
    return path if path.is_absolute() else SWARM_SECRETS_DIR / path


class DockerSecretsSettingsSource(PydanticBaseSettingsSource):
    """
    Reads `<SETTING_NAME>_FILE` env vars and loads the setting from that file.

    Swarm mounts service secrets under /run/secrets, so both
    `JWT_SECRET_FILE=/run/secrets/console_jwt` and `JWT_SECRET_FILE=console_jwt`
    point at the same secret.
    """

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        file_setting = os.getenv(f"{field_name}_FILE")
        if not file_setting:
            return None, field_name, False

        path = secret_file_path(file_setting)
        try:
            return path.read_text().strip(), field_name, False
        except OSError as e:
            logger.warning(
                "Could not read secret file",
                setting=field_name,
                path=str(path),
                error=str(e),
            )
            return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                values[key] = value
        return values
