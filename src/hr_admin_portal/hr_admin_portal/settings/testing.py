SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": "http://backend.test/api/v1",
    "timeout": 5,
    "extra_headers": {},
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_DAYS = 1
