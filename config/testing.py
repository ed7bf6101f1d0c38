import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LONG_NAME_WARNING = int(os.getenv("LONG_NAME_WARNING", "50"))
AVERAGE_PRECISION = int(os.getenv("AVERAGE_PRECISION", "2"))

WEB_HOST = "127.0.0.1"
WEB_PORT = 5000
