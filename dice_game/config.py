from dotenv import load_dotenv

import os

load_dotenv()

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

DEV = os.environ.get("DEV", "true").lower() == "true"
SQLITE_URL = os.environ.get("SQLITE_URL", "sqlite:///./dice_game.db")
POSTGRES_URL = os.environ.get("POSTGRES_URL")

ANONYMOUS_NICKNAME = "Anonymous"
