import os

from .config import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
DEBUG = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
