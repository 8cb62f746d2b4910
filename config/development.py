import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Demo instructor/students/courses on startup
SEED_SAMPLE_DATA = env_flag("SEED_SAMPLE_DATA", "1")

REQUIRE_PASSWORD_MATCH = env_flag("REQUIRE_PASSWORD_MATCH")
REPORT_AUTHORIZATION_ERRORS = env_flag("REPORT_AUTHORIZATION_ERRORS")
ENFORCE_ENROLLMENT = env_flag("ENFORCE_ENROLLMENT")

CREDENTIALS_PATH = os.getenv("CREDENTIALS_PATH", "instance/credentials.json")
CREDENTIALS_NAMESPACE = Config.CREDENTIALS_NAMESPACE

IDENTITY_BACKEND = Config.IDENTITY_BACKEND
DB_CONFIG = Config.DB_CONFIG
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
