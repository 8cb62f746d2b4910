import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "change-me"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Remember-me storage; unset means process memory only
    CREDENTIALS_PATH = os.environ.get("CREDENTIALS_PATH") or None
    CREDENTIALS_NAMESPACE = os.environ.get("CREDENTIALS_NAMESPACE", "attendance_prefs")

    # "none" keeps everything in memory, "mysql" enables the remote account endpoints
    IDENTITY_BACKEND = os.environ.get("IDENTITY_BACKEND", "none").lower()
    DB_CONFIG = {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", ""),
        "database": os.environ.get("DB_NAME", "course_attendance"),
    }
    AUTO_INIT_DB = env_flag("AUTO_INIT_DB")
