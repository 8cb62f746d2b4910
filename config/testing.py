SECRET_KEY = "test-secret"
DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_SAMPLE_DATA = False

# Tests exercise the stricter login path
REQUIRE_PASSWORD_MATCH = True
REPORT_AUTHORIZATION_ERRORS = False
ENFORCE_ENROLLMENT = False

CREDENTIALS_PATH = None
CREDENTIALS_NAMESPACE = "attendance_prefs"

IDENTITY_BACKEND = "none"
DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "course_attendance_test",
}
AUTO_INIT_DB = False
