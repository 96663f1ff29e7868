import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Database Settings
    database_file: str = os.getenv("LIBRARY_DB_FILE", "library.db")

    # Logging Settings
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CLI Settings
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain")

    # App Settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")


settings = Settings()
