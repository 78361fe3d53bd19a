"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

_base = Path(__file__).resolve().parent
load_dotenv(_base / ".env")
load_dotenv()  # also allow process env

APP_TITLE: str = os.getenv("APP_TITLE", "CV Analyzer API")
APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated list, "*" allows any origin
CORS_ORIGINS: list = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Used when the caller does not send a targetRole
DEFAULT_TARGET_ROLE: str = os.getenv("DEFAULT_TARGET_ROLE", "Software Developer")

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
