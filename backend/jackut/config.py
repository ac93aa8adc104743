# jackut/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Jackut API"
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Snapshot file holding users + communities between runs
    data_file: str = os.getenv("JACKUT_DATA_FILE", "data/jackut.json")
    # Write the snapshot when the app shuts down (same as calling /system/shutdown)
    persist_on_shutdown: bool = os.getenv("PERSIST_ON_SHUTDOWN", "true").lower() in ("true", "1", "yes")

settings = Settings()  # Instantiate configuration
