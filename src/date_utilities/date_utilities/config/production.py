import os

DEFAULT_LOCALE = os.getenv("DATE_UTILITIES_LOCALE", "en_US")
