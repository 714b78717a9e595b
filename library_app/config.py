import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Storage
    data_file: str = os.getenv("LIBRARY_DATA_FILE", "library.csv")
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "True")

    # Application
    app_name: str = os.getenv("APP_NAME", "Library System")
    app_version: str = os.getenv("APP_VERSION", "0.6.0")
    debug: bool = _env_flag("DEBUG", "False")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
