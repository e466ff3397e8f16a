from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class BridgeSettings(BaseSettings):
    """Configuration for payload handling between the UI and the task backend."""
    APP_NAME: str = "taskdesk"
    APP_VERSION: str = "0.1.0"
    STRICT_PAYLOADS: bool = False
    ACCEPT_LEGACY_TASK_KEYS: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_bridge_settings() -> BridgeSettings:
    """Return a fresh bridge settings instance."""
    return BridgeSettings()
