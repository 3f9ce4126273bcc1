from pydantic_settings import BaseSettings
from pathlib import Path

class Settings(BaseSettings):
    # Dice
    die_faces: int = 20
    critical_margin: int = 10

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None
    enable_color: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "ADJUDICATOR_"

settings = Settings()
