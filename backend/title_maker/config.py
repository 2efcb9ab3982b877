import os

from dotenv import load_dotenv

load_dotenv()

APP_NAME = "Creative Title Maker API"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./title_maker.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Header set by the upstream auth gateway once the caller is signed in
USER_ID_HEADER = os.getenv("USER_ID_HEADER", "X-User-Id")

CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    CORS_ORIGINS.extend(o.strip() for o in _extra.split(",") if o.strip())
