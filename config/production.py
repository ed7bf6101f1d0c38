import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LONG_NAME_WARNING = int(os.getenv("LONG_NAME_WARNING", "50"))
AVERAGE_PRECISION = int(os.getenv("AVERAGE_PRECISION", "2"))

WEB_HOST = os.getenv("WEB_HOST", "0.0.0.0")
WEB_PORT = int(os.getenv("WEB_PORT", "8000"))
