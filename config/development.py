import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Names longer than this still register, with a logged advisory
LONG_NAME_WARNING = int(os.getenv("LONG_NAME_WARNING", "50"))
# Decimal places used when rendering pay amounts
AVERAGE_PRECISION = int(os.getenv("AVERAGE_PRECISION", "2"))

WEB_HOST = os.getenv("WEB_HOST", "127.0.0.1")
WEB_PORT = int(os.getenv("WEB_PORT", "5000"))
