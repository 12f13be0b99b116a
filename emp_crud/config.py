# config.py
import os
import re
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = _env_flag("SQL_ECHO", False)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

SEED_DEPARTMENTS = _env_flag("SEED_DEPARTMENTS", True)
DEFAULT_DEPARTMENTS = ("Development", "Testing")

# --- Paging ---
PAGE_SIZE = 5
NAVIGATE_PAGES = 5

# --- Field rules ---
# 6-16 latin letters/digits/_/- or 2-5 CJK characters
NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]{6,16}|[\u2E80-\u9FFF]{2,5}")
NAME_MESSAGE = "Name must be 2-5 CJK characters or 6-16 letters, digits, '_' or '-'"
NAME_TAKEN_MESSAGE = "Name is not available"

EMAIL_PATTERN = re.compile(r"([a-z0-9_.-]+)@([\da-z.-]+)\.([a-z.]{2,6})")
EMAIL_MESSAGE = "Email format is invalid"

GENDER_CODES = ("M", "F")
GENDER_MESSAGE = "Gender must be 'M' or 'F'"
