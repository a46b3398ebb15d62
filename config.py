# config.py
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# -----------------------------
# Front end
# -----------------------------
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8080")
ANALYZE_PATH = "/api/analyze"


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


# Unset means no client-side timeout
REQUEST_TIMEOUT = _optional_float("REQUEST_TIMEOUT")
MESSAGE_TTL_SECONDS = float(os.getenv("MESSAGE_TTL_SECONDS", "5"))
SCORE_TICK_SECONDS = float(os.getenv("SCORE_TICK_SECONDS", "0.01"))

# -----------------------------
# Backend
# -----------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
