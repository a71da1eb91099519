import os
from pathlib import Path
from dotenv import load_dotenv

# Tests set DISABLE_DOTENV=1 so a local .env cannot redirect them to another database.
if os.getenv("DISABLE_DOTENV") != "1":
    load_dotenv(override=True)

_TRUTHY = {"1", "true", "True", "yes", "YES"}

_raw_database_url = (os.getenv("DATABASE_URL") or "").strip()
# Local SQLite file next to the backend package when DATABASE_URL is unset.
_default_sqlite_path = (Path(__file__).resolve().parent.parent / "dev.db").as_posix()
DATABASE_URL = _raw_database_url or f"sqlite:///{_default_sqlite_path}"
SQL_ECHO = (os.getenv("SQL_ECHO", "0") or "0").strip() in _TRUTHY

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080") or "8080")
LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()

# CORS: comma-separated origins, "*" allows every origin.
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in (os.getenv("CORS_ALLOW_ORIGINS", "*") or "*").split(",")
    if origin.strip()
] or ["*"]
