import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite+aiosqlite:///./todos.db",
)
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# "console" or "json"
LOG_FORMAT = os.getenv("LOG_FORMAT", "console").lower()

APP_TITLE = os.getenv("APP_TITLE", "Todos API")
