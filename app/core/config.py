import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# Database connection
DB_USERNAME = os.getenv("DB_USERNAME")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_NAME = os.getenv("DB_NAME")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_HOST = os.getenv("DB_HOST", "localhost")

# An explicit DATABASE_URL wins over the individual DB_* settings
DATABASE_URL = os.getenv("DATABASE_URL") or (
    f"postgresql+psycopg2://{DB_USERNAME}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# Tokens
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    logging.getLogger(__name__).warning("SECRET_KEY is not set, signing tokens with an insecure default")
    SECRET_KEY = "change-me"
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

# HTTP
API_PREFIX = os.getenv("API_PREFIX", "").rstrip("/")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Optional admin account created on startup
ADMIN_NAME = os.getenv("ADMIN_NAME")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
