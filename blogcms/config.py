# blogcms/config.py
import os
from dotenv import load_dotenv
load_dotenv()

DB_DSN = os.getenv("DATABASE_URL")
PLATFORM_CONFIG_KEY = os.getenv("PLATFORM_CONFIG_KEY", "platform_config")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROOT_PATH = os.getenv("ROOT_PATH", "")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8091"))
