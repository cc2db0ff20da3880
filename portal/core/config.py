from pathlib import Path
from dotenv import load_dotenv
import os


ROOT_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(ROOT_DIR / ".env")

# Transactions need a replica set, even a single-node one
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017/?replicaSet=rs0")
DATABASE_NAME = os.getenv("DATABASE_NAME", "school_portal")

JWT_SECRET = os.getenv("JWT_SECRET", "change-me-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRY_HOURS = int(os.getenv("JWT_EXPIRY_HOURS", "24"))

SCHOOL_TIMEZONE = os.getenv("SCHOOL_TIMEZONE", "Asia/Kolkata")
DEFAULT_SESSION_DURATION = int(os.getenv("DEFAULT_SESSION_DURATION", "60"))

UNLOGGED_FLAG_LIMIT = int(os.getenv("UNLOGGED_FLAG_LIMIT", "5"))
RECENT_CALENDAR_LIMIT = int(os.getenv("RECENT_CALENDAR_LIMIT", "5"))
ACTIVITY_LIMIT = int(os.getenv("ACTIVITY_LIMIT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
