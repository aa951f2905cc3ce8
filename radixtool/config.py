from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RADIXTOOL_", env_file=".env", extra="ignore")

    history_path: Path = Path.home() / ".radixtool" / "history.json"

    # Animation timings, in seconds
    typing_delay: float = 0.03
    fade_steps: int = 10
    fade_delay: float = 0.1

    log_level: str = "WARNING"
