"""
Runtime Settings

Environment-driven configuration. Values come from the process environment,
optionally seeded from a local .env file.
"""
import os
from typing import List
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./userhub.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "127.0.0.1")

PORT = int(os.getenv("PORT", "8000"))


def get_cors_origins() -> List[str]:
    """Parse CORS_ORIGINS (comma separated) into a list; defaults to ["*"]."""
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]
