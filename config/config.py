"""Settings shared by every environment; environment modules override what differs."""
import os


def _db_config(prefix: str, *, default_database: str, default_password: str = "") -> dict:
    return {
        "host": os.getenv(f"{prefix}_HOST", "localhost"),
        "port": int(os.getenv(f"{prefix}_PORT", "3306")),
        "user": os.getenv(f"{prefix}_USER", "root"),
        "password": os.getenv(f"{prefix}_PASSWORD", default_password),
        "database": os.getenv(f"{prefix}_DATABASE", default_database),
    }


SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Employees, departments, company settings
HR_DB_CONFIG = _db_config("HR_DB", default_database="hr_db")

# Clocking-device log (read directly, one row per punch)
ATTENDANCE_DB_CONFIG = _db_config("MYSQL", default_database="attendance_db")
ATTENDANCE_TABLE = os.getenv("MYSQL_ATTENDANCE_TABLE", "attendance")
ATTENDANCE_DEVICE_COLUMN = os.getenv("MYSQL_ATTENDANCE_DEVICE_COLUMN", "user_id")
ATTENDANCE_TIME_COLUMN = os.getenv("MYSQL_ATTENDANCE_TIME_COLUMN", "check_time")

# Bearer tokens accepted by the API: "token1:subject1,token2:subject2"
API_TOKENS = os.getenv("API_TOKENS", "")

SETTINGS_CACHE_SECONDS = int(os.getenv("SETTINGS_CACHE_SECONDS", "300"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = bool(int(os.getenv("DEBUG", "0")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
