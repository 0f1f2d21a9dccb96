# Seeder/config.py
# Environment-driven settings; a .env file in the working directory is honoured.
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROOT_DIR = Path(__file__).resolve().parent.parent


class Settings:
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/")
    DB_NAME: str = os.getenv("DB_NAME", "talawa-api")
    # directory holding one <collection>.json fixture per collection
    SAMPLE_DATA_DIR: Path = Path(os.getenv("SAMPLE_DATA_DIR", str(ROOT_DIR / "sample_data")))
    # parsed by db.get_client so a bad value fails the run instead of the import
    MONGO_TIMEOUT_MS: str = os.getenv("MONGO_TIMEOUT_MS", "5000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# module-level settings object (imported elsewhere as `from .config import settings`)
settings = Settings()
