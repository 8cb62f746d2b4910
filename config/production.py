import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

SEED_SAMPLE_DATA = env_flag("SEED_SAMPLE_DATA")

REQUIRE_PASSWORD_MATCH = env_flag("REQUIRE_PASSWORD_MATCH")
REPORT_AUTHORIZATION_ERRORS = env_flag("REPORT_AUTHORIZATION_ERRORS")
ENFORCE_ENROLLMENT = env_flag("ENFORCE_ENROLLMENT")

CREDENTIALS_PATH = Config.CREDENTIALS_PATH
CREDENTIALS_NAMESPACE = Config.CREDENTIALS_NAMESPACE

IDENTITY_BACKEND = Config.IDENTITY_BACKEND
DB_CONFIG = Config.DB_CONFIG
AUTO_INIT_DB = Config.AUTO_INIT_DB
