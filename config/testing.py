from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

API_TOKENS = "test-token:tester"
SETTINGS_CACHE_SECONDS = 0

LOG_LEVEL = "DEBUG"
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
